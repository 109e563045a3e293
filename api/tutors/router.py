"""
Tutor API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path

from core.db import INT4_MAX, INT4_MIN
from core.patching import DeleteConfirmation

from . import schemas, service

router = APIRouter(prefix="/tutors")

# Ids outside the int4 column range are rejected as invalid input.
RowId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


@router.get("/")
async def get_all_tutors() -> list[schemas.Tutor]:
    return await service.list_tutors()


@router.get("/{tutor_id}")
async def get_tutor_details(tutor_id: RowId) -> schemas.Tutor:
    return await service.get_tutor(tutor_id)


@router.post("/")
async def post_new_tutor(new_tutor: schemas.NewTutor) -> schemas.Tutor:
    return await service.create_tutor(new_tutor)


@router.put("/{tutor_id}")
async def update_tutor_details(tutor_id: RowId, update_tutor: schemas.UpdateTutor) -> schemas.Tutor:
    return await service.update_tutor(tutor_id, update_tutor)


@router.delete("/{tutor_id}")
async def delete_tutor(tutor_id: RowId) -> DeleteConfirmation:
    return await service.delete_tutor(tutor_id)
