"""
Ticket Infrastructure Layer
===========================

- Models: SQLAlchemy mappings of tickets, ticket_events, ticket_messages
- Queries: statement builders for the ticket endpoints
"""

from support_ops.tickets.infrastructure.models import (
    TicketEventModel,
    TicketMessageModel,
    TicketModel,
)

__all__ = ["TicketEventModel", "TicketMessageModel", "TicketModel"]
