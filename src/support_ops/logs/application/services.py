"""
Service Log Application Services
================================

Error and latency reports over the service log stream.
"""

from typing import Any, Optional

from support_ops.config import settings
from support_ops.infrastructure.database import QueryExecutor
from support_ops.logs.infrastructure import queries
from support_ops.shared.application import DateRange
from support_ops.shared.domain import as_number
from support_ops.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class LogsService:
    """
    Read-side service for service log reports.

    Args:
        executor: Runs statements against the reporting store
        percentile: Nearest-rank percentile reported as ``p95_latency_ms``
        top_errors_limit: Rows returned by the top errors report
    """

    def __init__(
        self,
        executor: QueryExecutor,
        percentile: Optional[int] = None,
        top_errors_limit: Optional[int] = None,
    ):
        self._executor = executor
        self._percentile = percentile or settings.latency_percentile
        self._top_errors_limit = top_errors_limit or settings.top_errors_limit

    async def get_top_errors(
        self,
        window: DateRange,
        service: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Most frequent ERROR signatures in the window."""
        rows = await self._executor.fetch_all(
            queries.top_errors_query(window, service, self._top_errors_limit)
        )
        return [
            {
                **row,
                "error_count": int(row["error_count"]),
                "days_with_errors": int(row["days_with_errors"]),
            }
            for row in rows
        ]

    async def get_latency_trend(
        self,
        window: DateRange,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Hourly latency statistics per service and endpoint.

        Percentile, average, maximum and count come from one grouped
        statement, so they always describe the same rows.
        """
        rows = await self._executor.fetch_all(
            queries.latency_trend_query(window, service, endpoint, self._percentile)
        )

        logger.debug("Latency trend computed", extra={"buckets": len(rows)})

        return [
            {
                "hour_start": row["hour_start"],
                "service_name": row["service_name"],
                "endpoint": row["endpoint"],
                "p95_latency_ms": as_number(row["p95_latency_ms"]),
                "avg_latency_ms": float(row["avg_latency_ms"]) if row["avg_latency_ms"] is not None else None,
                "max_latency_ms": as_number(row["max_latency_ms"]),
                "request_count": int(row["request_count"]),
            }
            for row in rows
        ]
