"""
Ticket Application Layer
========================

Contains:
- DTOs: normalized filters, result pages, API field maps
- Services: TicketService
"""

from support_ops.tickets.application.dto import (
    TICKET_DETAIL_FIELDS,
    TICKET_EVENT_FIELDS,
    TICKET_LIST_FIELDS,
    TICKET_MESSAGE_FIELDS,
    TicketListFilters,
    TicketPage,
)
from support_ops.tickets.application.services import TicketService

__all__ = [
    "TICKET_DETAIL_FIELDS",
    "TICKET_EVENT_FIELDS",
    "TICKET_LIST_FIELDS",
    "TICKET_MESSAGE_FIELDS",
    "TicketListFilters",
    "TicketPage",
    "TicketService",
]
