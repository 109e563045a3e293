"""
Course API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path

from core.db import INT4_MAX, INT4_MIN
from core.patching import DeleteConfirmation

from . import schemas, service

router = APIRouter(prefix="/courses")

# Ids outside the int4 column range are rejected as invalid input.
RowId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


@router.post("/")
async def post_new_course(new_course: schemas.CreateCourse) -> schemas.Course:
    return await service.create_course(new_course)


@router.get("/{tutor_id}")
async def get_courses_for_tutor(tutor_id: RowId) -> list[schemas.Course]:
    return await service.list_courses_for_tutor(tutor_id)


@router.get("/{tutor_id}/{course_id}")
async def get_course_details(tutor_id: RowId, course_id: RowId) -> schemas.Course:
    return await service.get_course_detail(tutor_id, course_id)


@router.put("/{tutor_id}/{course_id}")
async def update_course_details(
    tutor_id: RowId,
    course_id: RowId,
    update_course: schemas.UpdateCourse,
) -> schemas.Course:
    return await service.update_course_detail(tutor_id, course_id, update_course)


@router.delete("/{tutor_id}/{course_id}")
async def delete_course(tutor_id: RowId, course_id: RowId) -> DeleteConfirmation:
    return await service.delete_course(tutor_id, course_id)
