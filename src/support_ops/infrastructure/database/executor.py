"""
Query Executor
==============

Runs SQLAlchemy Core statements and returns plain row dicts.

Driver failures are logged and re-raised as typed repository exceptions,
keeping the original error as ``__cause__``.
"""

import logging
import re
from typing import Any, Optional

from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from support_ops.core import (
    DatabaseUnavailableException,
    QueryTimeoutException,
    RepositoryException,
)
from support_ops.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)

# SQLSTATE classes: 08 connection exception, 28 invalid authorization
_UNAVAILABLE_SQLSTATE_PREFIXES = ("08", "28")
_TIMEOUT_SQLSTATES = {"57014"}  # query_canceled (statement_timeout)

_TIMEOUT_PATTERN = re.compile(r"time(d)?[\s_-]?out|canceling statement", re.IGNORECASE)
_UNAVAILABLE_PATTERN = re.compile(
    r"login failed|password authentication failed|access denied"
    r"|could not connect|connection refused|connection is closed"
    r"|connection was closed|no route to host|name or service not known",
    re.IGNORECASE,
)


def _sqlstate(error: sa_exc.SQLAlchemyError) -> Optional[str]:
    orig = getattr(error, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return str(code) if code else None


def translate_database_error(error: BaseException) -> RepositoryException:
    """
    Map a driver/pool failure onto the typed repository exceptions.

    Exception types and SQLSTATE codes are checked first; message patterns
    are the fallback for drivers that only report text.
    """
    # Builtin TimeoutError subclasses OSError, so it is checked first
    if isinstance(error, (TimeoutError, sa_exc.TimeoutError)):
        return QueryTimeoutException()

    if isinstance(error, sa_exc.DBAPIError):
        orig = getattr(error, "orig", None)
        if isinstance(orig, TimeoutError):
            return QueryTimeoutException()

        code = _sqlstate(error)
        if code in _TIMEOUT_SQLSTATES:
            return QueryTimeoutException()
        if code and code.startswith(_UNAVAILABLE_SQLSTATE_PREFIXES):
            return DatabaseUnavailableException()
        if error.connection_invalidated or isinstance(error, sa_exc.InterfaceError):
            return DatabaseUnavailableException()

    if isinstance(error, OSError):
        return DatabaseUnavailableException()

    message = str(error)
    if _TIMEOUT_PATTERN.search(message):
        return QueryTimeoutException()
    if _UNAVAILABLE_PATTERN.search(message):
        return DatabaseUnavailableException()

    return RepositoryException(message, {"error_type": type(error).__name__})


class QueryExecutor:
    """
    Thin wrapper to keep SQL organized and parameterized.

    Every statement handed in is a SQLAlchemy construct whose user-supplied
    values are bound parameters.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def fetch_all(self, statement: Executable) -> list[dict[str, Any]]:
        """Execute a SELECT and return every row as a dict."""
        result = await self._execute(statement)
        return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, statement: Executable) -> Optional[dict[str, Any]]:
        """Execute a SELECT and return the first row as a dict, or None."""
        result = await self._execute(statement)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def _execute(self, statement: Executable) -> Result:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Executing query", extra={"sql": str(statement)})

        try:
            with log_latency(logger, "query", level=logging.DEBUG):
                return await self._session.execute(statement)
        except (sa_exc.SQLAlchemyError, OSError) as e:
            logger.error(
                "Query failed",
                extra={"error_type": type(e).__name__, "error": str(e)}
            )
            raise translate_database_error(e) from e
