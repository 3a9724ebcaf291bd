"""
Overview Application Layer
==========================

Contains:
- DTOs: API field maps
- Services: OverviewService
"""

from support_ops.overview.application.dto import (
    SERVICE_TREND_FIELDS,
    SUMMARY_FIELDS,
    SUPPORT_TREND_FIELDS,
)
from support_ops.overview.application.services import OverviewService

__all__ = [
    "SERVICE_TREND_FIELDS",
    "SUMMARY_FIELDS",
    "SUPPORT_TREND_FIELDS",
    "OverviewService",
]
