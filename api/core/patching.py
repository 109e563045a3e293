"""
Partial-update ("patch") helpers shared by the entity families.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel


class DeleteConfirmation(BaseModel):
    message: str
    rows_affected: int


def patch_changes(patch: BaseModel) -> dict[str, Any]:
    """
    Fields the client actually supplied. JSON null counts as "not supplied".
    """
    return patch.model_dump(exclude_none=True)


def apply_patch(current: Mapping[str, Any], changes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Overlay `changes` on `current`. Keys unknown to `current` are ignored.
    """
    merged = dict(current)
    for field, value in changes.items():
        if field in merged:
            merged[field] = value
    return merged


def delete_confirmation(rows: int) -> DeleteConfirmation:
    # Zero rows is still a successful delete.
    noun = "record" if rows == 1 else "records"
    return DeleteConfirmation(message=f"Deleted {rows} {noun}", rows_affected=rows)
