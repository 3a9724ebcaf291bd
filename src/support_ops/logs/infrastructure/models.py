"""
Service Log Infrastructure Models
==================================

Core table mapping of the service log stream.

Log events have no row identity the API needs, so the stream is declared as
a plain Table on the shared metadata rather than an ORM class.
"""

from sqlalchemy import Column, DateTime, Integer, String, Table, Text

from support_ops.infrastructure.database import Base

service_log_events = Table(
    "service_log_events",
    Base.metadata,
    Column("service_name", String(128), nullable=False, index=True),
    Column("endpoint", String(255)),
    Column("level", String(16), nullable=False),
    Column("event_time", DateTime(timezone=True), nullable=False, index=True),
    Column("latency_ms", Integer),
    Column("error_signature", Text),
)
