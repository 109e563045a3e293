"""
Tutor data-access operations.

Each operation returns a schema object or raises a `CatalogError`; raw store
errors never escape (see `core.errors.store_errors`).
"""

from __future__ import annotations

import logging

from core import db
from core.errors import NotFoundError, StoreFailureError, store_errors
from core.patching import DeleteConfirmation, apply_patch, delete_confirmation, patch_changes

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_tutor(row: dict) -> schemas.Tutor:
    return schemas.Tutor.model_validate(row)


async def list_tutors() -> list[schemas.Tutor]:
    with store_errors("list tutors"):
        rows = await repository.list_tutors()
    # An empty catalog is reported as not found, unlike course listings.
    if not rows:
        raise NotFoundError("No tutors found")
    return [_to_tutor(row) for row in rows]


async def get_tutor(tutor_id: int) -> schemas.Tutor:
    with store_errors("fetch tutor"):
        row = await repository.get_tutor(tutor_id)
    if row is None:
        raise NotFoundError("Tutor id not found")
    return _to_tutor(row)


async def create_tutor(new_tutor: schemas.NewTutor) -> schemas.Tutor:
    with store_errors("create tutor"):
        row = await repository.insert_tutor(
            tutor_name=new_tutor.tutor_name,
            tutor_pic_url=new_tutor.tutor_pic_url,
            tutor_profile=new_tutor.tutor_profile,
        )
    if row is None:
        raise StoreFailureError("Failed to create tutor")
    tutor = _to_tutor(row)
    logger.info("tutor_created tutor_id=%s", tutor.tutor_id)
    return tutor


async def update_tutor(tutor_id: int, patch: schemas.UpdateTutor) -> schemas.Tutor:
    """
    Read-merge-write under a row lock: fields missing from `patch` keep
    their current value.
    """
    changes = patch_changes(patch)
    with store_errors("update tutor"):
        async with db.transaction() as conn:
            current = await repository.get_tutor(tutor_id, conn=conn, for_update=True)
            if current is None:
                raise NotFoundError("Tutor id not found")

            merged = apply_patch(current, changes)
            row = await repository.update_tutor(
                tutor_id,
                tutor_name=merged["tutor_name"],
                tutor_pic_url=merged["tutor_pic_url"],
                tutor_profile=merged["tutor_profile"],
                conn=conn,
            )
    if row is None:
        raise NotFoundError("Tutor not found")
    logger.info("tutor_updated tutor_id=%s fields=%s", tutor_id, sorted(changes))
    return _to_tutor(row)


async def delete_tutor(tutor_id: int) -> DeleteConfirmation:
    # Courses owned by the tutor are left to the store's FK policy.
    with store_errors("delete tutor"):
        rows = await repository.delete_tutor(tutor_id)
    logger.info("tutor_deleted tutor_id=%s rows=%s", tutor_id, rows)
    return delete_confirmation(rows)
