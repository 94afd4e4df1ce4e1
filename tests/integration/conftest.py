from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.core.integration_db_safety import assert_safe_integration_db
from app.db.models import Base
from app.db.session import engine


def _reset_statement() -> str:
    # Children before parents keeps the list readable; CASCADE handles the rest.
    tables = [table.name for table in reversed(Base.metadata.sorted_tables)]
    return f"TRUNCATE TABLE {', '.join(tables)} RESTART IDENTITY CASCADE"


@pytest.fixture(scope="session", autouse=True)
def guard_integration_db_target() -> None:
    assert_safe_integration_db(
        engine.url.render_as_string(hide_password=False),
        allowed_hosts=get_settings().integration_allowed_hosts,
    )


@pytest.fixture(autouse=True)
async def fresh_game_tables() -> AsyncIterator[None]:
    # Each test runs on its own event loop, so pooled asyncpg connections cannot be reused.
    await engine.dispose()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            await conn.execute(text(_reset_statement()))
    except (SQLAlchemyError, OSError) as exc:  # pragma: no cover - environment-dependent
        pytest.skip(f"Postgres is required for integration tests: {exc}")

    yield

    await engine.dispose()
