"""
Ticket Application DTOs
========================

Normalized ticket-listing filters, service results and the field maps that
rename storage columns to API names.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from support_ops.shared.application import DateRange, Pagination


@dataclass(frozen=True)
class TicketListFilters:
    """Already-normalized filters of GET /api/tickets."""
    status: Optional[str] = None
    channel: Optional[str] = None
    priority: Optional[str] = None
    issue_type: Optional[str] = None
    created: DateRange = field(default_factory=DateRange)


@dataclass(frozen=True)
class TicketPage:
    """One page of tickets plus the total across all pages."""
    rows: list[dict[str, Any]]
    pagination: Pagination
    total: int

    @property
    def pagination_info(self) -> dict[str, int]:
        return {
            "page": self.pagination.page,
            "pageSize": self.pagination.page_size,
            "total": self.total,
            "totalPages": self.pagination.total_pages(self.total),
        }


# ========== Field Maps (storage column -> API field) ==========

TICKET_LIST_FIELDS = {
    "ticket_id": "ticketId",
    "customer_id": "customerId",
    "merchant_id": "merchantId",
    "status": "status",
    "channel": "channel",
    "priority": "priority",
    "issue_type": "issueType",
    "summary": "summary",
    "created_at": "createdAt",
    "first_response_at": "firstResponseAt",
    "resolved_at": "resolvedAt",
    "first_response_seconds": "firstResponseSeconds",
}

TICKET_DETAIL_FIELDS = {
    **TICKET_LIST_FIELDS,
    "sla_due_at": "slaDueAt",
    "sla_breached": "slaBreached",
}

TICKET_EVENT_FIELDS = {
    "ticket_event_id": "ticketEventId",
    "ticket_id": "ticketId",
    "event_type": "eventType",
    "event_time": "eventTime",
    "actor_type": "actorType",
    "actor_agent_id": "actorAgentId",
    "old_value": "oldValue",
    "new_value": "newValue",
    "payload_json": "payloadJson",
}

TICKET_MESSAGE_FIELDS = {
    "message_id": "messageId",
    "ticket_id": "ticketId",
    "message_time": "messageTime",
    "actor_type": "actorType",
    "agent_id": "agentId",
    "channel": "channel",
    "message_text": "messageText",
    "message_summary": "messageSummary",
    "sentiment": "sentiment",
}
