from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass

from sqlalchemy.engine import make_url

TEST_DB_NAME_RE = re.compile(r"test", re.IGNORECASE)
DEFAULT_ALLOWED_HOSTS = frozenset({"localhost", "127.0.0.1", "::1", "postgres", "real_or_ai_postgres"})


@dataclass(frozen=True, slots=True)
class IntegrationDbTarget:
    backend: str
    database_name: str
    host: str

    @classmethod
    def from_url(cls, database_url: str) -> IntegrationDbTarget:
        parsed = make_url(database_url)
        return cls(
            backend=parsed.get_backend_name(),
            database_name=(parsed.database or "").strip(),
            host=(parsed.host or "").strip().lower(),
        )


@dataclass(frozen=True, slots=True)
class IntegrationDbSafetyResult:
    is_safe: bool
    reason: str
    database_name: str
    host: str


def find_safety_violation(target: IntegrationDbTarget, *, allowed_hosts: Collection[str]) -> str | None:
    """Returns why ``target`` must not be wiped by integration tests, or ``None``."""
    if target.backend != "postgresql":
        return "Integration tests support only PostgreSQL test databases."
    if not target.database_name:
        return "Database name is empty."
    if TEST_DB_NAME_RE.search(target.database_name) is None:
        return "Database name must clearly indicate a test database (contain 'test')."
    if target.host not in allowed_hosts:
        return f"Host is not one of the allowed integration-test hosts: {', '.join(sorted(allowed_hosts))}."
    return None


def assess_integration_db_safety(
    database_url: str,
    *,
    allowed_hosts: Collection[str] = DEFAULT_ALLOWED_HOSTS,
) -> IntegrationDbSafetyResult:
    target = IntegrationDbTarget.from_url(database_url)
    violation = find_safety_violation(target, allowed_hosts=allowed_hosts)
    return IntegrationDbSafetyResult(
        is_safe=violation is None,
        reason=violation or "ok",
        database_name=target.database_name,
        host=target.host,
    )


def assert_safe_integration_db(
    database_url: str,
    *,
    allowed_hosts: Collection[str] = DEFAULT_ALLOWED_HOSTS,
) -> None:
    result = assess_integration_db_safety(database_url, allowed_hosts=allowed_hosts)
    if result.is_safe:
        return

    raise RuntimeError(
        "Refusing to run integration tests against a non-test database.\n"
        f"Reason: {result.reason}\n"
        f"Resolved DB: name='{result.database_name}' host='{result.host}'\n"
        "Required: a dedicated local PostgreSQL test DB, e.g. 'real_or_ai_test'."
    )
