"""Health check endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from users_api.schemas.common import HealthStatus

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus, responses={503: {"model": HealthStatus}})
def health(request: Request):
    try:
        with request.app.state.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        LOGGER.error("DB health check failed: %s", exc)
        return JSONResponse(status_code=503, content=HealthStatus(status="degraded").model_dump())
    return HealthStatus(status="ok")
