"""
Course data-access operations.
"""

from __future__ import annotations

import logging

from core import db
from core.errors import NotFoundError, StoreFailureError, store_errors
from core.patching import DeleteConfirmation, apply_patch, delete_confirmation, patch_changes

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_course(row: dict) -> schemas.Course:
    return schemas.Course.model_validate(row)


async def list_courses_for_tutor(tutor_id: int) -> list[schemas.Course]:
    # No courses is an empty list, not a not-found.
    with store_errors("list courses"):
        rows = await repository.list_courses_for_tutor(tutor_id)
    return [_to_course(row) for row in rows]


async def get_course_detail(tutor_id: int, course_id: int) -> schemas.Course:
    with store_errors("fetch course"):
        row = await repository.get_course(tutor_id, course_id)
    if row is None:
        raise NotFoundError("Course id not found")
    return _to_course(row)


async def create_course(new_course: schemas.CreateCourse) -> schemas.Course:
    # The tutor reference is checked by the store's foreign key, not here.
    with store_errors("create course"):
        row = await repository.insert_course(**new_course.model_dump())
    if row is None:
        raise StoreFailureError("Failed to create course")
    course = _to_course(row)
    logger.info("course_created tutor_id=%s course_id=%s", course.tutor_id, course.course_id)
    return course


async def update_course_detail(
    tutor_id: int,
    course_id: int,
    patch: schemas.UpdateCourse,
) -> schemas.Course:
    """
    Read-merge-write on the (tutor_id, course_id) row, under a row lock.
    """
    changes = patch_changes(patch)
    with store_errors("update course"):
        async with db.transaction() as conn:
            current = await repository.get_course(tutor_id, course_id, conn=conn, for_update=True)
            if current is None:
                raise NotFoundError("Course id not found")

            merged = apply_patch(current, changes)
            row = await repository.update_course(
                tutor_id,
                course_id,
                conn=conn,
                **{field: merged[field] for field in schemas.UPDATABLE_FIELDS},
            )
    if row is None:
        raise NotFoundError("Course not found")
    logger.info(
        "course_updated tutor_id=%s course_id=%s fields=%s",
        tutor_id,
        course_id,
        sorted(changes),
    )
    return _to_course(row)


async def delete_course(tutor_id: int, course_id: int) -> DeleteConfirmation:
    with store_errors("delete course"):
        rows = await repository.delete_course(tutor_id, course_id)
    logger.info("course_deleted tutor_id=%s course_id=%s rows=%s", tutor_id, course_id, rows)
    return delete_confirmation(rows)
