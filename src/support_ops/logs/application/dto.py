"""
Service Log DTOs
================

Field maps that rename report columns to API names.
"""

TOP_ERROR_FIELDS = {
    "error_signature": "errorSignature",
    "service_name": "serviceName",
    "error_count": "errorCount",
    "last_occurrence": "lastOccurrence",
    "days_with_errors": "daysWithErrors",
}

LATENCY_TREND_FIELDS = {
    "hour_start": "hourStart",
    "service_name": "serviceName",
    "endpoint": "endpoint",
    "p95_latency_ms": "p95LatencyMs",
    "avg_latency_ms": "avgLatencyMs",
    "max_latency_ms": "maxLatencyMs",
    "request_count": "requestCount",
}
