"""
Ticket Application Services
============================

Coordinate query building and execution for the ticket endpoints.
"""

from typing import Any

from support_ops.core import ResourceNotFoundException
from support_ops.infrastructure.database import QueryExecutor
from support_ops.shared.application import Clock, Pagination, utcnow
from support_ops.shared.infrastructure.logging import get_logger
from support_ops.tickets.application.dto import TicketListFilters, TicketPage
from support_ops.tickets.domain import TicketTimings
from support_ops.tickets.infrastructure import queries

logger = get_logger(__name__)


class TicketService:
    """
    Read-side service for tickets and their history.

    Args:
        executor: Runs statements against the reporting store
        clock: Source of "now" for live first-response measurements
    """

    def __init__(self, executor: QueryExecutor, clock: Clock = utcnow):
        self._executor = executor
        self._clock = clock

    async def list_tickets(
        self,
        filters: TicketListFilters,
        pagination: Pagination,
    ) -> TicketPage:
        """
        One page of tickets, newest first, plus the total match count.

        A page past the end returns no rows but keeps the total; its data
        query is never sent.
        """
        count_row = await self._executor.fetch_one(queries.count_tickets_query(filters))
        total = int(count_row["total"]) if count_row else 0

        rows = []
        if not pagination.is_past_end(total):
            rows = await self._executor.fetch_all(
                queries.list_tickets_query(filters, pagination, self._clock())
            )

        logger.debug(
            "Tickets listed",
            extra={"total": total, "page": pagination.page, "returned": len(rows)}
        )
        return TicketPage(rows=rows, pagination=pagination, total=total)

    async def get_ticket_detail(self, ticket_id: str) -> dict[str, Any]:
        """
        Full ticket row with derived SLA facts.

        Raises:
            ResourceNotFoundException: If no ticket has this ID
        """
        row = await self._executor.fetch_one(queries.ticket_detail_query(ticket_id))
        if row is None:
            raise ResourceNotFoundException("Ticket", ticket_id)

        timings = TicketTimings.from_row(row)
        return {
            **row,
            "first_response_seconds": timings.first_response_seconds(self._clock()),
            "sla_breached": timings.is_sla_breached,
        }

    async def get_ticket_events(self, ticket_id: str) -> list[dict[str, Any]]:
        return await self._executor.fetch_all(queries.ticket_events_query(ticket_id))

    async def get_ticket_messages(self, ticket_id: str) -> list[dict[str, Any]]:
        return await self._executor.fetch_all(queries.ticket_messages_query(ticket_id))
