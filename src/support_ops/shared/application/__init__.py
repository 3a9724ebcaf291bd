"""
Shared Application Layer
========================

Request input normalization shared by every endpoint.
"""

from support_ops.shared.application.filters import (
    Clock,
    DateRange,
    Pagination,
    normalize_enum,
    normalize_text,
    optional_date_range,
    parse_date,
    require_date_range,
    utcnow,
)

__all__ = [
    "Clock",
    "DateRange",
    "Pagination",
    "normalize_enum",
    "normalize_text",
    "optional_date_range",
    "parse_date",
    "require_date_range",
    "utcnow",
]
