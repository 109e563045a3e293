"""
Course API schemas (records, create payload, patch payload).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.db import INT4_MAX, INT4_MIN

# Columns a patch may touch; ownership, id and posting time are fixed.
UPDATABLE_FIELDS: tuple[str, ...] = (
    "course_name",
    "course_description",
    "course_format",
    "course_structure",
    "course_duration",
    "course_price",
    "course_language",
    "course_level",
)


class Course(BaseModel):
    course_id: int
    tutor_id: int
    course_name: str
    course_description: str | None = None
    course_format: str | None = None
    course_structure: str | None = None
    course_duration: str | None = None
    course_price: int | None = None
    course_language: str | None = None
    course_level: str | None = None
    posted_time: datetime | None = None


class CreateCourse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tutor_id: int = Field(..., ge=INT4_MIN, le=INT4_MAX)
    course_name: str = Field(..., max_length=140)
    course_description: str | None = Field(default=None, max_length=2000)
    course_format: str | None = Field(default=None, max_length=30)
    course_structure: str | None = Field(default=None, max_length=200)
    course_duration: str | None = Field(default=None, max_length=30)
    course_price: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)
    course_language: str | None = Field(default=None, max_length=30)
    course_level: str | None = Field(default=None, max_length=30)


class UpdateCourse(BaseModel):
    """
    Partial course update. Omitted (or null) fields keep their stored value.
    """

    model_config = ConfigDict(extra="forbid")

    course_name: str | None = Field(default=None, max_length=140)
    course_description: str | None = Field(default=None, max_length=2000)
    course_format: str | None = Field(default=None, max_length=30)
    course_structure: str | None = Field(default=None, max_length=200)
    course_duration: str | None = Field(default=None, max_length=30)
    course_price: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)
    course_language: str | None = Field(default=None, max_length=30)
    course_level: str | None = Field(default=None, max_length=30)
