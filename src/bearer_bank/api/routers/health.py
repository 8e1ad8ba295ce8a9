"""
bearer_bank.api.routers.health

Service info and liveness endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def index() -> dict[str, Any]:
    return {
        "message": "Bearer Bank API is running",
        "endpoints": {
            "login": "POST /login",
            "balance": "GET /balance",
            "deposit": "POST /deposit",
            "withdraw": "POST /withdraw",
        },
    }


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP. There is no external dependency to probe.
    return {"status": "ok"}
