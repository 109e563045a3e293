"""
Course persistence (raw SQL).

Detail, update and delete are always scoped by (tutor_id, course_id).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

_COURSE_COLUMNS = """course_id, tutor_id, course_name, course_description, course_format,
               course_structure, course_duration, course_price, course_language,
               course_level, posted_time"""


async def list_courses_for_tutor(tutor_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COURSE_COLUMNS}
        FROM ezy_course_c6
        WHERE tutor_id = $1
        ORDER BY course_id
        """,
        tutor_id,
    )


async def get_course(
    tutor_id: int,
    course_id: int,
    *,
    conn: asyncpg.Connection | None = None,
    for_update: bool = False,
) -> dict[str, Any] | None:
    lock = "FOR UPDATE" if for_update else ""
    return await db.fetch_one(
        f"""
        SELECT {_COURSE_COLUMNS}
        FROM ezy_course_c6
        WHERE tutor_id = $1
          AND course_id = $2
        {lock}
        """,
        tutor_id,
        course_id,
        conn=conn,
    )


async def insert_course(
    *,
    tutor_id: int,
    course_name: str,
    course_description: str | None = None,
    course_format: str | None = None,
    course_structure: str | None = None,
    course_duration: str | None = None,
    course_price: int | None = None,
    course_language: str | None = None,
    course_level: str | None = None,
) -> dict[str, Any] | None:
    """
    Insert a course. `course_id` and `posted_time` come from column defaults.
    An unknown `tutor_id` raises asyncpg.ForeignKeyViolationError.
    """
    return await db.fetch_one(
        f"""
        INSERT INTO ezy_course_c6 (
            tutor_id, course_name, course_description, course_format,
            course_structure, course_duration, course_price, course_language,
            course_level
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING {_COURSE_COLUMNS}
        """,
        tutor_id,
        course_name,
        course_description,
        course_format,
        course_structure,
        course_duration,
        course_price,
        course_language,
        course_level,
    )


async def update_course(
    tutor_id: int,
    course_id: int,
    *,
    course_name: str,
    course_description: str | None,
    course_format: str | None,
    course_structure: str | None,
    course_duration: str | None,
    course_price: int | None,
    course_language: str | None,
    course_level: str | None,
    conn: asyncpg.Connection | None = None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE ezy_course_c6
        SET course_name = $3,
            course_description = $4,
            course_format = $5,
            course_structure = $6,
            course_duration = $7,
            course_price = $8,
            course_language = $9,
            course_level = $10
        WHERE tutor_id = $1
          AND course_id = $2
        RETURNING {_COURSE_COLUMNS}
        """,
        tutor_id,
        course_id,
        course_name,
        course_description,
        course_format,
        course_structure,
        course_duration,
        course_price,
        course_language,
        course_level,
        conn=conn,
    )


async def delete_course(tutor_id: int, course_id: int) -> int:
    status = await db.execute(
        """
        DELETE FROM ezy_course_c6
        WHERE tutor_id = $1
          AND course_id = $2
        """,
        tutor_id,
        course_id,
    )
    return db.rows_affected(status)
