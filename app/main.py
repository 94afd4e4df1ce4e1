from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from app.api.routes.ajax import router as ajax_router
from app.api.routes.health import router as health_router
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.session import engine
from app.services.session_store import get_session_store

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    del app
    logger.info("app_started", env=get_settings().app_env)
    yield
    store = get_session_store()
    aclose = getattr(store, "aclose", None)
    if aclose is not None:
        await aclose()
    get_session_store.cache_clear()
    await engine.dispose()
    logger.info("app_stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=not settings.is_dev)

    app = FastAPI(
        title="Real or AI Arena API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health_router)
    app.include_router(ajax_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.is_dev)


if __name__ == "__main__":
    run()
