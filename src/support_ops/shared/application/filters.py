"""
Request Filter Normalization
============================

Turns raw query-string values into validated, bounded inputs for the
query builders:

- Pagination: a clamped value object (page >= 1, 1 <= page_size <= max)
- Dates: ISO 8601 strings parsed to aware UTC datetimes
- Date ranges: required ranges for reports, defaulted window for listings
- Enum/text filters: trimmed (and upper-cased for enum-like values)
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from support_ops.config import settings
from support_ops.core import (
    InvalidDateException,
    InvalidRangeException,
    MissingParameterException,
)

Clock = Callable[[], datetime]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# OFFSET is a bigint in PostgreSQL
MAX_OFFSET = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_leading_int(raw: object) -> Optional[int]:
    """Parse the leading integer of a value ("3abc" -> 3, "2.5" -> 2)."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class Pagination:
    """
    Bounded page/page-size pair.

    Only ``from_params`` should be used to build one from request input; the
    constructor refuses values outside the allowed range, so a Pagination in
    hand is always safe to render into LIMIT/OFFSET.
    """

    page: int
    page_size: int
    max_page_size: int = 100

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if not 1 <= self.page_size <= self.max_page_size:
            raise ValueError(f"page_size must be between 1 and {self.max_page_size}")
        if self.offset > MAX_OFFSET:
            raise ValueError(f"offset must not exceed {MAX_OFFSET}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @classmethod
    def from_params(
        cls,
        page: object = None,
        page_size: object = None,
        default_page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
    ) -> "Pagination":
        default_page_size = default_page_size or settings.default_page_size
        max_page_size = max_page_size or settings.max_page_size

        page_num = _parse_leading_int(page)
        size = _parse_leading_int(page_size)

        if page_num is None:
            page_num = 1
        if size is None:
            size = default_page_size

        size = min(max_page_size, max(1, size))
        page_num = min(max(1, page_num), MAX_OFFSET // size + 1)

        return cls(page=page_num, page_size=size, max_page_size=max_page_size)

    def total_pages(self, total: int) -> int:
        return -(-total // self.page_size)

    def is_past_end(self, total: int) -> bool:
        """True when the page starts at or after the last of ``total`` rows."""
        return self.offset >= total


@dataclass(frozen=True)
class DateRange:
    """Half-open ``[start, end)`` window; either bound may be open."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


def parse_date(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO 8601 date or date-time.

    Naive values are taken as UTC. Empty input returns None.

    Raises:
        InvalidDateException: If the value is not ISO 8601
    """
    if raw is None or not raw.strip():
        return None

    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError:
        raise InvalidDateException(details={"value": raw})

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _ensure_ordered(start: datetime, end: datetime) -> None:
    if start >= end:
        raise InvalidRangeException(
            details={"from": start.isoformat(), "to": end.isoformat()}
        )


def require_date_range(from_raw: Optional[str], to_raw: Optional[str]) -> DateRange:
    """
    Validate the mandatory ``from``/``to`` pair of the report endpoints.

    Raises:
        MissingParameterException: If either bound is absent
        InvalidDateException: If either bound is not ISO 8601
        InvalidRangeException: If from >= to
    """
    if not from_raw or not to_raw:
        raise MissingParameterException(
            "Missing required parameters: from and to (ISO 8601 format)"
        )

    start = parse_date(from_raw)
    end = parse_date(to_raw)
    if start is None or end is None:
        raise MissingParameterException(
            "Missing required parameters: from and to (ISO 8601 format)"
        )

    _ensure_ordered(start, end)
    return DateRange(start=start, end=end)


def optional_date_range(
    from_raw: Optional[str],
    to_raw: Optional[str],
    now: Optional[datetime] = None,
    default_days: Optional[int] = None,
) -> DateRange:
    """
    Validate the optional window of the ticket listing.

    Without either bound the window is the trailing ``default_days`` ending
    at ``now``. A single bound is applied on its own.
    """
    start = parse_date(from_raw)
    end = parse_date(to_raw)

    if start is None and end is None:
        now = now or utcnow()
        days = default_days or settings.default_window_days
        return DateRange(start=now - timedelta(days=days), end=now)

    if start is not None and end is not None:
        _ensure_ordered(start, end)

    return DateRange(start=start, end=end)


def normalize_text(value: Optional[str]) -> Optional[str]:
    """Trim a free-text filter; blank means absent."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def normalize_enum(value: Optional[str]) -> Optional[str]:
    """Trim and upper-case an enum-like filter; blank means absent."""
    value = normalize_text(value)
    return value.upper() if value else None
