"""
Tutor API schemas (records, create payload, patch payload).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Tutor(BaseModel):
    tutor_id: int
    tutor_name: str
    tutor_pic_url: str
    tutor_profile: str


class NewTutor(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tutor_name: str = Field(..., max_length=200)
    tutor_pic_url: str = Field(..., max_length=200)
    tutor_profile: str = Field(..., max_length=2000)


class UpdateTutor(BaseModel):
    # Omitted (or null) fields keep their stored value.
    model_config = ConfigDict(extra="forbid")

    tutor_name: str | None = Field(default=None, max_length=200)
    tutor_pic_url: str | None = Field(default=None, max_length=200)
    tutor_profile: str | None = Field(default=None, max_length=2000)
