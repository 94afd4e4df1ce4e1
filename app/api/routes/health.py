from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.db.session import SessionLocal
from app.services.session_store import get_session_store

router = APIRouter(tags=["health"])
logger = structlog.get_logger(__name__)

CheckResult = dict[str, str]


async def _guarded(name: str, probe: Callable[[], Awaitable[bool]]) -> CheckResult:
    # Exception text can carry DSNs, so only the type is logged and a fixed code is returned.
    try:
        if await probe():
            return {"status": "ok"}
        return {"status": "failed", "error": f"{name}_unexpected_response"}
    except Exception as exc:
        logger.warning("health_check_failed", check=name, error_type=type(exc).__name__)
        return {"status": "failed", "error": f"{name}_unavailable"}


async def _probe_database() -> bool:
    async with SessionLocal() as session:
        result = await session.execute(text("SELECT 1"))
    return result.scalar() == 1


async def _check_database() -> CheckResult:
    return await _guarded("database", _probe_database)


async def _check_session_store() -> CheckResult:
    return await _guarded("session_store", lambda: get_session_store().ping())


async def _collect_checks() -> dict[str, CheckResult]:
    database, session_store = await asyncio.gather(_check_database(), _check_session_store())
    return {"database": database, "session_store": session_store}


def _checks_response(checks: dict[str, CheckResult], *, ok_status: str, failed_status: str) -> JSONResponse:
    passed = all(check["status"] == "ok" for check in checks.values())
    content: dict[str, Any] = {"status": ok_status if passed else failed_status, "checks": checks}
    return JSONResponse(
        status_code=status.HTTP_200_OK if passed else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=content,
    )


@router.get("/health")
async def health() -> JSONResponse:
    return _checks_response(await _collect_checks(), ok_status="ok", failed_status="degraded")


@router.get("/ready")
async def ready() -> JSONResponse:
    return _checks_response(await _collect_checks(), ok_status="ready", failed_status="not_ready")


@router.get("/live")
async def live() -> dict[str, str]:
    return {"status": "live"}
