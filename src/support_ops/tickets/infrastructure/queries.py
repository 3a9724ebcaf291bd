"""
Ticket Query Builders
======================

SQLAlchemy Core statements for the ticket endpoints.

All filter values become bound parameters. LIMIT/OFFSET are rendered as
literal integers taken from a clamped Pagination.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Select, and_, bindparam, cast, extract, func, select
from sqlalchemy.sql.elements import ColumnElement

from support_ops.infrastructure.database import literal_int
from support_ops.shared.application import Pagination
from support_ops.tickets.application.dto import TicketListFilters
from support_ops.tickets.infrastructure.models import (
    TicketEventModel,
    TicketMessageModel,
    TicketModel,
)

LIST_COLUMNS = (
    TicketModel.ticket_id,
    TicketModel.customer_id,
    TicketModel.merchant_id,
    TicketModel.status,
    TicketModel.channel,
    TicketModel.priority,
    TicketModel.issue_type,
    TicketModel.summary,
    TicketModel.created_at,
    TicketModel.first_response_at,
    TicketModel.resolved_at,
)


# ========== Derived Expressions ==========

def now_param(now: datetime) -> ColumnElement[datetime]:
    """The request instant as a typed bound parameter."""
    return bindparam("now", now, type_=DateTime(timezone=True))


def first_response_seconds(now: datetime) -> ColumnElement[int]:
    """
    Whole seconds between creation and first response.

    Unanswered tickets are measured against ``now``.
    """
    reference = func.coalesce(TicketModel.first_response_at, now_param(now))
    return cast(func.trunc(extract("epoch", reference - TicketModel.created_at)), BigInteger)


def sla_breached() -> ColumnElement[bool]:
    """First response recorded after the SLA due time."""
    return and_(
        TicketModel.first_response_at.is_not(None),
        TicketModel.sla_due_at.is_not(None),
        TicketModel.first_response_at > TicketModel.sla_due_at,
    )


def created_between(start: datetime, end: datetime) -> list[ColumnElement[bool]]:
    return [TicketModel.created_at >= start, TicketModel.created_at < end]


# ========== Listing ==========

def ticket_filter_conditions(filters: TicketListFilters) -> list[ColumnElement[bool]]:
    """WHERE predicates for the ticket listing."""
    conditions = []

    if filters.status:
        conditions.append(TicketModel.status == filters.status)
    if filters.channel:
        conditions.append(TicketModel.channel == filters.channel)
    if filters.priority:
        conditions.append(TicketModel.priority == filters.priority)
    if filters.issue_type:
        conditions.append(TicketModel.issue_type == filters.issue_type)

    if filters.created.start is not None:
        conditions.append(TicketModel.created_at >= filters.created.start)
    if filters.created.end is not None:
        conditions.append(TicketModel.created_at < filters.created.end)

    return conditions


def count_tickets_query(filters: TicketListFilters) -> Select:
    return (
        select(func.count().label("total"))
        .select_from(TicketModel)
        .where(*ticket_filter_conditions(filters))
    )


def list_tickets_query(
    filters: TicketListFilters,
    pagination: Pagination,
    now: datetime,
) -> Select:
    return (
        select(*LIST_COLUMNS, first_response_seconds(now).label("first_response_seconds"))
        .where(*ticket_filter_conditions(filters))
        .order_by(TicketModel.created_at.desc())
        .limit(literal_int(pagination.page_size))
        .offset(literal_int(pagination.offset))
    )


# ========== Single Ticket ==========

def ticket_detail_query(ticket_id: str) -> Select:
    return select(*TicketModel.__table__.columns).where(TicketModel.ticket_id == ticket_id)


def ticket_events_query(ticket_id: str) -> Select:
    return (
        select(*TicketEventModel.__table__.columns)
        .where(TicketEventModel.ticket_id == ticket_id)
        .order_by(TicketEventModel.event_time.desc())
    )


def ticket_messages_query(ticket_id: str) -> Select:
    return (
        select(*TicketMessageModel.__table__.columns)
        .where(TicketMessageModel.ticket_id == ticket_id)
        .order_by(TicketMessageModel.message_time.desc())
    )
