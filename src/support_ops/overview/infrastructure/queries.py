"""
Overview Query Builders
========================

Ticket-side statements of the overview reports. Log-side statements are
shared with the logs module.
"""

from datetime import datetime

from sqlalchemy import Date, Select, cast, func, select

from support_ops.config import TicketStatus
from support_ops.infrastructure.database import utc_wall_clock
from support_ops.shared.application import DateRange
from support_ops.tickets.infrastructure.models import TicketModel
from support_ops.tickets.infrastructure.queries import (
    created_between,
    first_response_seconds,
    sla_breached,
)


def is_closed():
    return TicketModel.status == TicketStatus.CLOSED


def ticket_summary_query(window: DateRange, now: datetime) -> Select:
    """Ticket counts and rounded average first response over the window."""
    return (
        select(
            func.count().label("total_tickets"),
            func.count().filter(is_closed()).label("tickets_closed"),
            func.count().filter(sla_breached()).label("sla_breaches"),
            func.round(func.avg(first_response_seconds(now))).label("avg_first_response_seconds"),
        )
        .select_from(TicketModel)
        .where(*created_between(window.start, window.end))
    )


def support_trend_query(window: DateRange) -> Select:
    """Per UTC creation day: created, closed and SLA-breached tickets."""
    day = cast(utc_wall_clock(TicketModel.created_at), Date).label("date")

    return (
        select(
            day,
            func.count().label("tickets_created"),
            func.count().filter(is_closed()).label("tickets_closed"),
            func.count().filter(sla_breached()).label("sla_breaches"),
        )
        .where(*created_between(window.start, window.end))
        .group_by(day)
        .order_by(day)
    )
