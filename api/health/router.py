"""
Health endpoint with a diagnostic visit count.
"""

from __future__ import annotations

from fastapi import APIRouter

from core import config
from core.visits import visit_counter

router = APIRouter()


@router.get("/health")
def health() -> dict:
    count = visit_counter.increment()
    return {
        "status": "ok",
        "message": f"{config.health_check_response()} {count} times",
    }
