"""
Service Log Infrastructure Layer
================================

- Models: Core table of the service log stream
- Queries: statement builders for error and latency reports
"""

from support_ops.logs.infrastructure.models import service_log_events

__all__ = ["service_log_events"]
