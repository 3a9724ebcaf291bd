"""
Overview DTOs
=============

Field maps that rename report columns to API names.
"""

SUMMARY_FIELDS = {
    "total_tickets": "totalTickets",
    "tickets_closed": "ticketsClosed",
    "sla_breaches": "slaBreaches",
    "avg_first_response_seconds": "avgFirstResponseSeconds",
    "p95_first_response_seconds": "p95FirstResponseSeconds",
    "total_error_events": "totalErrorEvents",
}

SUPPORT_TREND_FIELDS = {
    "date": "date",
    "tickets_created": "ticketsCreated",
    "tickets_closed": "ticketsClosed",
    "sla_breaches": "slaBreaches",
}

SERVICE_TREND_FIELDS = {
    "date": "date",
    "total_events": "totalEvents",
    "error_events": "errorEvents",
    "p95_latency_ms": "p95LatencyMs",
}
