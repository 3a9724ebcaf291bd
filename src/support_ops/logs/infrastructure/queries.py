"""
Service Log Query Builders
===========================

SQLAlchemy Core statements over ``service_log_events``.

Percentiles use ``percentile_disc``, which picks the value at rank
ceil(p * n) of the ordered group: the nearest-rank rule, computed by the
store in the same statement as the counts. Day and hour buckets are taken on
UTC wall-clock time.
"""

from typing import Optional

from sqlalchemy import (
    Date,
    Float,
    Numeric,
    Select,
    bindparam,
    cast,
    distinct,
    func,
    literal_column,
    select,
)
from sqlalchemy.sql.elements import ColumnElement

from support_ops.config import LogLevel
from support_ops.infrastructure.database import literal_int, utc_wall_clock
from support_ops.logs.infrastructure.models import service_log_events as events
from support_ops.shared.application import DateRange


# ========== Shared Expressions ==========

def event_time_between(window: DateRange) -> list[ColumnElement[bool]]:
    return [events.c.event_time >= window.start, events.c.event_time < window.end]


def is_error() -> ColumnElement[bool]:
    return events.c.level == LogLevel.ERROR


def event_day() -> ColumnElement:
    """Calendar day of an event."""
    return cast(utc_wall_clock(events.c.event_time), Date)


def event_hour() -> ColumnElement[str]:
    """Hour bucket rendered as 'YYYY-MM-DD HH:00:00'."""
    # Literal arguments keep SELECT and GROUP BY textually identical
    truncated = func.date_trunc(literal_column("'hour'"), utc_wall_clock(events.c.event_time))
    return func.to_char(truncated, literal_column("'YYYY-MM-DD HH24:00:00'"))


def latency_percentile(percent: int) -> ColumnElement:
    """Nearest-rank percentile of ``latency_ms`` over the group."""
    fraction = bindparam("percentile", percent / 100, type_=Float)
    return func.percentile_disc(fraction).within_group(events.c.latency_ms)


# ========== Top Errors ==========

def top_errors_query(
    window: DateRange,
    service: Optional[str] = None,
    limit: int = 20,
) -> Select:
    """Most frequent error signatures in the window, most frequent first."""
    conditions = [is_error(), *event_time_between(window)]
    if service:
        conditions.append(events.c.service_name == service)

    error_count = func.count().label("error_count")

    return (
        select(
            events.c.error_signature,
            events.c.service_name,
            error_count,
            func.max(events.c.event_time).label("last_occurrence"),
            func.count(distinct(event_day())).label("days_with_errors"),
        )
        .where(*conditions)
        .group_by(events.c.error_signature, events.c.service_name)
        .order_by(error_count.desc(), events.c.error_signature)
        .limit(literal_int(limit))
    )


# ========== Latency Trend ==========

def latency_conditions(
    window: DateRange,
    service: Optional[str] = None,
    endpoint: Optional[str] = None,
) -> list[ColumnElement[bool]]:
    conditions = [*event_time_between(window), events.c.latency_ms.is_not(None)]
    if service:
        conditions.append(events.c.service_name == service)
    if endpoint:
        conditions.append(events.c.endpoint == endpoint)
    return conditions


def latency_trend_query(
    window: DateRange,
    service: Optional[str] = None,
    endpoint: Optional[str] = None,
    percent: int = 95,
) -> Select:
    """Per hour x service x endpoint: percentile, average, max and count of latencies."""
    hour = event_hour().label("hour_start")

    return (
        select(
            hour,
            events.c.service_name,
            events.c.endpoint,
            latency_percentile(percent).label("p95_latency_ms"),
            func.round(cast(func.avg(events.c.latency_ms), Numeric), 2).label("avg_latency_ms"),
            func.max(events.c.latency_ms).label("max_latency_ms"),
            func.count().label("request_count"),
        )
        .where(*latency_conditions(window, service, endpoint))
        .group_by(hour, events.c.service_name, events.c.endpoint)
        .order_by(hour, events.c.service_name, events.c.endpoint)
    )


# ========== Daily Service Trend ==========

def service_trend_query(window: DateRange, percent: int = 95) -> Select:
    """
    Per day: events, error events and latency percentile.

    Only events that carry a latency are counted, so days without any
    produce no row.
    """
    day = event_day().label("date")

    return (
        select(
            day,
            func.count().label("total_events"),
            func.count().filter(is_error()).label("error_events"),
            latency_percentile(percent).label("p95_latency_ms"),
        )
        .where(*event_time_between(window), events.c.latency_ms.is_not(None))
        .group_by(day)
        .order_by(day)
    )


def error_event_count_query(window: DateRange) -> Select:
    return (
        select(func.count().label("total_error_events"))
        .select_from(events)
        .where(is_error(), *event_time_between(window))
    )
