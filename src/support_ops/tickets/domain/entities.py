"""
Ticket Domain Entities
=======================

Pure Python view of a ticket's timing facts.

Following Domain-Driven Design principles, the SLA and first-response rules
live here free of infrastructure concerns; the SQL builders express the same
rules for aggregate queries.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class TicketTimings:
    """
    The timestamps that drive a ticket's SLA metrics.

    ``first_response_at`` is the instant of the first reply; ``sla_due_at``
    the committed deadline for it.
    """

    created_at: datetime
    first_response_at: Optional[datetime] = None
    sla_due_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TicketTimings":
        return cls(
            created_at=row["created_at"],
            first_response_at=row.get("first_response_at"),
            sla_due_at=row.get("sla_due_at"),
        )

    @property
    def is_sla_breached(self) -> bool:
        """First response happened after the due time."""
        return (
            self.first_response_at is not None
            and self.sla_due_at is not None
            and self.first_response_at > self.sla_due_at
        )

    def first_response_seconds(self, now: datetime) -> int:
        """
        Whole seconds from creation to first response.

        Unanswered tickets measure up to ``now``, so the value keeps growing
        until a reply arrives.
        """
        reference = self.first_response_at or now
        return int((reference - self.created_at).total_seconds())
