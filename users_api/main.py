"""FastAPI application factory wiring settings, the connection pool, and routes."""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from sqlalchemy.engine import Engine

from users_api.api import routes_health, routes_users
from users_api.api.error_handlers import register_error_handlers
from users_api.core.config import Settings, get_settings
from users_api.core.db import Base, create_db_engine, create_session_factory
from users_api.models import user  # noqa: F401 - ensure models are registered
from users_api.repositories.user_repository import UserRepository

LOGGER = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    # One pool per process, handed to the repository explicitly.
    owns_engine = engine is None
    if owns_engine:
        engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
        LOGGER.info("Users API started (db=%s)", engine.url.render_as_string(hide_password=True))
        yield
        # Caller-supplied engines stay open for their owner.
        if owns_engine:
            engine.dispose()
        LOGGER.info("Users API shutting down")

    app = FastAPI(title="Users API", version="0.1.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = engine
    app.state.user_repository = UserRepository(create_session_factory(engine))

    register_error_handlers(app)

    app.include_router(routes_users.router)
    app.include_router(routes_health.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


app = create_app()
