"""
Test configuration and fixtures.

Provides:
- FakeExecutor: queued results in place of a database session
- FastAPI app with the executor dependency overridden
- HTTPX AsyncClient bound to the app through ASGITransport
"""
from datetime import datetime, timezone
from typing import Any, AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.dialects import postgresql

from support_ops.config import Settings
from support_ops.infrastructure.database import get_executor
from support_ops.main import create_app


FIXED_NOW = datetime(2024, 2, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeExecutor:
    """
    Stand-in for QueryExecutor.

    Each fetch pops the next queued result; every statement is recorded so
    tests can inspect the SQL that would have run.
    """

    def __init__(self, *results: Any):
        self.results = list(results)
        self.statements = []
        self.error = None

    def queue(self, *results: Any) -> "FakeExecutor":
        self.results.extend(results)
        return self

    def _next(self, statement):
        self.statements.append(statement)
        if self.error is not None:
            raise self.error
        return self.results.pop(0) if self.results else None

    async def fetch_all(self, statement) -> list[dict[str, Any]]:
        return self._next(statement) or []

    async def fetch_one(self, statement):
        return self._next(statement)


def compile_pg(statement):
    """Compile a statement for PostgreSQL, returning (sql, params)."""
    compiled = statement.compile(dialect=postgresql.dialect())
    return str(compiled), compiled.params


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="development", log_level="INFO")


@pytest.fixture
def app(executor, settings):
    application = create_app(settings)

    async def override_get_executor():
        yield executor

    application.dependency_overrides[get_executor] = override_get_executor
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
