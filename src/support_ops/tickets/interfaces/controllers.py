"""
Ticket Controllers (API Routes)
================================

FastAPI routes for the ticket endpoints.

Controllers are thin - they normalize query strings, delegate to the
application service and map rows to API field names.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from support_ops.infrastructure.database import QueryExecutor, get_executor
from support_ops.shared.api.responses import (
    ApiResponse,
    ErrorResponse,
    PaginatedResponse,
    map_row,
    map_rows,
    success_response,
)
from support_ops.shared.application import (
    Pagination,
    normalize_enum,
    normalize_text,
    optional_date_range,
    utcnow,
)
from support_ops.tickets.application import (
    TICKET_DETAIL_FIELDS,
    TICKET_EVENT_FIELDS,
    TICKET_LIST_FIELDS,
    TICKET_MESSAGE_FIELDS,
    TicketListFilters,
    TicketService,
)

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])


# ========== Example payloads for Swagger ==========

TICKET_LIST_EXAMPLE = {
    "success": True,
    "data": [
        {
            "ticketId": "T-100245",
            "customerId": "C-5531",
            "merchantId": "M-0192",
            "status": "OPEN",
            "channel": "EMAIL",
            "priority": "HIGH",
            "issueType": "refund_delay",
            "summary": "Refund not received after 10 days",
            "createdAt": "2024-01-15T10:00:00Z",
            "firstResponseAt": "2024-01-15T10:42:00Z",
            "resolvedAt": None,
            "firstResponseSeconds": 2520
        }
    ],
    "pagination": {"page": 1, "pageSize": 25, "total": 1, "totalPages": 1}
}


# ========== Dependencies ==========

async def get_ticket_service(
    executor: QueryExecutor = Depends(get_executor)
) -> TicketService:
    """Get ticket service instance."""
    return TicketService(executor)


# ========== Route Handlers ==========

@router.get(
    "",
    response_model=PaginatedResponse,
    summary="List tickets",
    description="""
    List tickets newest first with optional filters and pagination.

    **Filters:** `status`, `channel`, `priority` (case-insensitive),
    `issueType` (exact), `from` / `to` (ISO 8601, on `createdAt`).
    Without `from` and `to` only tickets created in the last 30 days are listed.

    **Pagination:** `page` (default 1), `pageSize` (default 25, max 100).
    """,
    responses={
        200: {"content": {"application/json": {"example": TICKET_LIST_EXAMPLE}}},
        400: {"model": ErrorResponse, "description": "Invalid date or range"},
    }
)
async def list_tickets(
    ticket_status: Optional[str] = Query(None, alias="status", description="Ticket status"),
    channel: Optional[str] = Query(None, description="Contact channel"),
    priority: Optional[str] = Query(None, description="Ticket priority"),
    issue_type: Optional[str] = Query(None, alias="issueType", description="Issue type (case-sensitive)"),
    from_: Optional[str] = Query(None, alias="from", description="Created at or after (ISO 8601)"),
    to: Optional[str] = Query(None, description="Created before (ISO 8601)"),
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Page size (default 25, max 100)"),
    service: TicketService = Depends(get_ticket_service)
):
    pagination = Pagination.from_params(page, page_size)
    filters = TicketListFilters(
        status=normalize_enum(ticket_status),
        channel=normalize_enum(channel),
        priority=normalize_enum(priority),
        issue_type=normalize_text(issue_type),
        created=optional_date_range(from_, to, now=utcnow()),
    )

    result = await service.list_tickets(filters, pagination)

    return success_response(
        map_rows(result.rows, TICKET_LIST_FIELDS),
        pagination=result.pagination_info,
    )


@router.get(
    "/{ticket_id}",
    response_model=ApiResponse,
    summary="Get ticket",
    responses={404: {"model": ErrorResponse, "description": "Ticket not found"}}
)
async def get_ticket(
    ticket_id: str,
    service: TicketService = Depends(get_ticket_service)
):
    ticket = await service.get_ticket_detail(ticket_id)
    return success_response(map_row(ticket, TICKET_DETAIL_FIELDS))


@router.get(
    "/{ticket_id}/events",
    response_model=ApiResponse,
    summary="Get ticket events",
    description="Audit trail of a ticket, newest first.",
)
async def get_ticket_events(
    ticket_id: str,
    service: TicketService = Depends(get_ticket_service)
):
    events = await service.get_ticket_events(ticket_id)
    return success_response(map_rows(events, TICKET_EVENT_FIELDS))


@router.get(
    "/{ticket_id}/messages",
    response_model=ApiResponse,
    summary="Get ticket messages",
    description="Conversation messages of a ticket, newest first.",
)
async def get_ticket_messages(
    ticket_id: str,
    service: TicketService = Depends(get_ticket_service)
):
    messages = await service.get_ticket_messages(ticket_id)
    return success_response(map_rows(messages, TICKET_MESSAGE_FIELDS))


# Export router for inclusion in main app
tickets_router = router
