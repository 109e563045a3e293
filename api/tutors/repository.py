"""
Tutor persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

_TUTOR_COLUMNS = "tutor_id, tutor_name, tutor_pic_url, tutor_profile"


async def list_tutors() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_TUTOR_COLUMNS}
        FROM ezy_tutor_c6
        """
    )


async def get_tutor(
    tutor_id: int,
    *,
    conn: asyncpg.Connection | None = None,
    for_update: bool = False,
) -> dict[str, Any] | None:
    """
    Fetch one tutor. With `for_update`, the row stays locked until the
    surrounding transaction ends.
    """
    lock = "FOR UPDATE" if for_update else ""
    return await db.fetch_one(
        f"""
        SELECT {_TUTOR_COLUMNS}
        FROM ezy_tutor_c6
        WHERE tutor_id = $1
        {lock}
        """,
        tutor_id,
        conn=conn,
    )


async def insert_tutor(*, tutor_name: str, tutor_pic_url: str, tutor_profile: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        INSERT INTO ezy_tutor_c6 (tutor_name, tutor_pic_url, tutor_profile)
        VALUES ($1, $2, $3)
        RETURNING {_TUTOR_COLUMNS}
        """,
        tutor_name,
        tutor_pic_url,
        tutor_profile,
    )


async def update_tutor(
    tutor_id: int,
    *,
    tutor_name: str,
    tutor_pic_url: str,
    tutor_profile: str,
    conn: asyncpg.Connection | None = None,
) -> dict[str, Any] | None:
    """
    Overwrite all mutable columns. Returns None when no row matched.
    """
    return await db.fetch_one(
        f"""
        UPDATE ezy_tutor_c6
        SET tutor_name = $2,
            tutor_pic_url = $3,
            tutor_profile = $4
        WHERE tutor_id = $1
        RETURNING {_TUTOR_COLUMNS}
        """,
        tutor_id,
        tutor_name,
        tutor_pic_url,
        tutor_profile,
        conn=conn,
    )


async def delete_tutor(tutor_id: int) -> int:
    status = await db.execute(
        """
        DELETE FROM ezy_tutor_c6
        WHERE tutor_id = $1
        """,
        tutor_id,
    )
    return db.rows_affected(status)
