"""
Shared test fixtures.

Tests never open a database connection: `FakeStore` stands in for the
repository modules and `db.transaction` is replaced by a context manager
that hands out a marker connection without touching the pool.
"""

from __future__ import annotations

import itertools
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import asyncpg
import pytest

from core import db
from courses import repository as course_repository
from tutors import repository as tutor_repository

POSTED_TIME = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

# Stands in for the connection that db.transaction() hands out.
TRANSACTION_CONN = object()


class FakeStore:
    """In-memory tutor/course relations with the repository call signatures."""

    def __init__(self) -> None:
        self.tutors: dict[int, dict[str, Any]] = {}
        self.courses: dict[int, dict[str, Any]] = {}
        self._tutor_ids = itertools.count(1)
        self._course_ids = itertools.count(1)
        self.fail_with: BaseException | None = None
        self.reads: list[dict[str, Any]] = []
        self.writes: list[dict[str, Any]] = []

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    # Tutors

    async def list_tutors(self) -> list[dict[str, Any]]:
        self._check()
        return [dict(row) for row in self.tutors.values()]

    async def get_tutor(self, tutor_id: int, *, conn: Any = None, for_update: bool = False) -> dict[str, Any] | None:
        self._check()
        self.reads.append({"table": "tutor", "conn": conn, "for_update": for_update})
        row = self.tutors.get(tutor_id)
        return dict(row) if row is not None else None

    async def insert_tutor(self, *, tutor_name: str, tutor_pic_url: str, tutor_profile: str) -> dict[str, Any]:
        self._check()
        tutor_id = next(self._tutor_ids)
        self.tutors[tutor_id] = {
            "tutor_id": tutor_id,
            "tutor_name": tutor_name,
            "tutor_pic_url": tutor_pic_url,
            "tutor_profile": tutor_profile,
        }
        return dict(self.tutors[tutor_id])

    async def update_tutor(self, tutor_id: int, *, conn: Any = None, **fields: Any) -> dict[str, Any] | None:
        self._check()
        self.writes.append({"table": "tutor", "conn": conn})
        row = self.tutors.get(tutor_id)
        if row is None:
            return None
        row.update(fields)
        return dict(row)

    async def delete_tutor(self, tutor_id: int) -> int:
        self._check()
        return 1 if self.tutors.pop(tutor_id, None) is not None else 0

    # Courses

    async def list_courses_for_tutor(self, tutor_id: int) -> list[dict[str, Any]]:
        self._check()
        return [dict(row) for cid, row in sorted(self.courses.items()) if row["tutor_id"] == tutor_id]

    async def get_course(
        self,
        tutor_id: int,
        course_id: int,
        *,
        conn: Any = None,
        for_update: bool = False,
    ) -> dict[str, Any] | None:
        self._check()
        self.reads.append({"table": "course", "conn": conn, "for_update": for_update})
        row = self.courses.get(course_id)
        if row is None or row["tutor_id"] != tutor_id:
            return None
        return dict(row)

    async def insert_course(self, *, tutor_id: int, course_name: str, **optional: Any) -> dict[str, Any]:
        self._check()
        if tutor_id not in self.tutors:
            raise asyncpg.ForeignKeyViolationError(
                'insert or update on table "ezy_course_c6" violates foreign key constraint'
            )
        course_id = next(self._course_ids)
        row = {
            "course_id": course_id,
            "tutor_id": tutor_id,
            "course_name": course_name,
            "course_description": None,
            "course_format": None,
            "course_structure": None,
            "course_duration": None,
            "course_price": None,
            "course_language": None,
            "course_level": None,
            "posted_time": POSTED_TIME,
        }
        row.update(optional)
        self.courses[course_id] = row
        return dict(row)

    async def update_course(
        self,
        tutor_id: int,
        course_id: int,
        *,
        conn: Any = None,
        **fields: Any,
    ) -> dict[str, Any] | None:
        self._check()
        self.writes.append({"table": "course", "conn": conn})
        row = self.courses.get(course_id)
        if row is None or row["tutor_id"] != tutor_id:
            return None
        row.update(fields)
        return dict(row)

    async def delete_course(self, tutor_id: int, course_id: int) -> int:
        self._check()
        row = self.courses.get(course_id)
        if row is None or row["tutor_id"] != tutor_id:
            return 0
        del self.courses[course_id]
        return 1


@asynccontextmanager
async def _no_transaction():
    yield TRANSACTION_CONN


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    fake = FakeStore()
    for name in ("list_tutors", "get_tutor", "insert_tutor", "update_tutor", "delete_tutor"):
        monkeypatch.setattr(tutor_repository, name, getattr(fake, name))
    for name in (
        "list_courses_for_tutor",
        "get_course",
        "insert_course",
        "update_course",
        "delete_course",
    ):
        monkeypatch.setattr(course_repository, name, getattr(fake, name))
    monkeypatch.setattr(db, "transaction", _no_transaction)
    return fake


@pytest.fixture
def transaction_conn() -> object:
    return TRANSACTION_CONN
