"""
Ticket Infrastructure Models
=============================

SQLAlchemy ORM mappings of the ticket tables.

The tables are populated by the ingestion pipeline; this service only reads
them, so the mappings describe the existing schema and are never used to
create it.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from support_ops.infrastructure.database import Base


class TicketModel(Base):
    """
    Database model for Ticket entity.

    Maps to the 'tickets' table.
    """
    __tablename__ = "tickets"

    ticket_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    merchant_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)

    # Enum-like attributes, stored upper-case (e.g. OPEN, CLOSED / EMAIL / HIGH)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    channel: Mapped[Optional[str]] = mapped_column(String(32))
    priority: Mapped[Optional[str]] = mapped_column(String(32))
    issue_type: Mapped[Optional[str]] = mapped_column(String(64))

    summary: Mapped[Optional[str]] = mapped_column(Text)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    first_response_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    sla_due_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))


class TicketEventModel(Base):
    """
    Append-only audit trail of ticket changes.

    Maps to the 'ticket_events' table.
    """
    __tablename__ = "ticket_events"

    ticket_event_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    ticket_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("tickets.ticket_id"), nullable=False, index=True
    )
    event_type: Mapped[str] = mapped_column(String(64), nullable=False)
    event_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    actor_type: Mapped[Optional[str]] = mapped_column(String(32))
    actor_agent_id: Mapped[Optional[str]] = mapped_column(String(64))
    old_value: Mapped[Optional[str]] = mapped_column(Text)
    new_value: Mapped[Optional[str]] = mapped_column(Text)
    payload_json: Mapped[Optional[str]] = mapped_column(Text)


class TicketMessageModel(Base):
    """
    Append-only conversation messages of a ticket.

    Maps to the 'ticket_messages' table.
    """
    __tablename__ = "ticket_messages"

    message_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    ticket_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("tickets.ticket_id"), nullable=False, index=True
    )
    message_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    actor_type: Mapped[Optional[str]] = mapped_column(String(32))
    agent_id: Mapped[Optional[str]] = mapped_column(String(64))
    channel: Mapped[Optional[str]] = mapped_column(String(32))
    message_text: Mapped[Optional[str]] = mapped_column(Text)
    message_summary: Mapped[Optional[str]] = mapped_column(Text)
    sentiment: Mapped[Optional[str]] = mapped_column(String(32))
