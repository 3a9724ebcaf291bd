"""
Ticket Domain Layer
===================

Contains:
- Entities: TicketTimings (SLA breach and first-response rules)

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from support_ops.tickets.domain.entities import TicketTimings

__all__ = ["TicketTimings"]
