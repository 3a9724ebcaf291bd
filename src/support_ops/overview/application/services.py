"""
Overview Application Services
=============================

Dashboard-level aggregates across tickets and service logs.
"""

from typing import Any, Optional

from support_ops.config import settings
from support_ops.infrastructure.database import QueryExecutor
from support_ops.logs.infrastructure import queries as log_queries
from support_ops.overview.infrastructure import queries
from support_ops.shared.application import Clock, DateRange, utcnow
from support_ops.shared.domain import as_number
from support_ops.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _count(row: Optional[dict[str, Any]], key: str) -> int:
    if not row or row.get(key) is None:
        return 0
    return int(row[key])


class OverviewService:
    """
    Read-side service for the overview dashboard.

    Args:
        executor: Runs statements against the reporting store
        clock: Source of "now" for unanswered tickets in the average
        percentile: Nearest-rank percentile reported as ``p95_latency_ms``
    """

    def __init__(
        self,
        executor: QueryExecutor,
        clock: Clock = utcnow,
        percentile: Optional[int] = None,
    ):
        self._executor = executor
        self._clock = clock
        self._percentile = percentile or settings.latency_percentile

    async def get_summary(self, window: DateRange) -> dict[str, Any]:
        """
        Ticket totals plus the ERROR log count for the same window.

        The two statements run one after the other on the same session.
        """
        tickets = await self._executor.fetch_one(
            queries.ticket_summary_query(window, self._clock())
        )
        errors = await self._executor.fetch_one(log_queries.error_event_count_query(window))

        avg = tickets.get("avg_first_response_seconds") if tickets else None
        return {
            "total_tickets": _count(tickets, "total_tickets"),
            "tickets_closed": _count(tickets, "tickets_closed"),
            "sla_breaches": _count(tickets, "sla_breaches"),
            "avg_first_response_seconds": int(round(avg)) if avg is not None else None,
            "p95_first_response_seconds": None,
            "total_error_events": _count(errors, "total_error_events"),
        }

    async def get_support_trend(self, window: DateRange) -> list[dict[str, Any]]:
        rows = await self._executor.fetch_all(queries.support_trend_query(window))
        return [
            {
                "date": row["date"],
                "tickets_created": int(row["tickets_created"]),
                "tickets_closed": int(row["tickets_closed"]),
                "sla_breaches": int(row["sla_breaches"]),
            }
            for row in rows
        ]

    async def get_service_trend(self, window: DateRange) -> list[dict[str, Any]]:
        """
        Daily event counts with the latency percentile of each day.

        Only events carrying a latency are counted, so a day without any
        is absent from the result.
        """
        rows = await self._executor.fetch_all(
            log_queries.service_trend_query(window, self._percentile)
        )

        logger.debug("Service trend computed", extra={"days": len(rows)})

        return [
            {
                "date": row["date"],
                "total_events": int(row["total_events"]),
                "error_events": int(row["error_events"]),
                "p95_latency_ms": as_number(row["p95_latency_ms"]),
            }
            for row in rows
        ]
