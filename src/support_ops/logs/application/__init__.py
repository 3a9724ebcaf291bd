"""
Service Log Application Layer
=============================

Contains:
- DTOs: API field maps
- Services: LogsService
"""

from support_ops.logs.application.dto import LATENCY_TREND_FIELDS, TOP_ERROR_FIELDS
from support_ops.logs.application.services import LogsService

__all__ = ["LATENCY_TREND_FIELDS", "TOP_ERROR_FIELDS", "LogsService"]
