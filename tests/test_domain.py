"""Ticket timing rules and response mapping."""
from datetime import datetime, timedelta, timezone

from support_ops.shared.api.responses import map_row, success_response
from support_ops.tickets.domain import TicketTimings

CREATED = datetime(2024, 1, 15, 10, tzinfo=timezone.utc)


def test_breach_requires_both_timestamps():
    assert not TicketTimings(CREATED).is_sla_breached
    assert not TicketTimings(CREATED, first_response_at=CREATED + timedelta(hours=5)).is_sla_breached
    assert not TicketTimings(CREATED, sla_due_at=CREATED).is_sla_breached


def test_breach_is_strictly_after_due():
    due = CREATED + timedelta(minutes=30)
    assert not TicketTimings(CREATED, due, due).is_sla_breached
    assert TicketTimings(CREATED, due + timedelta(seconds=1), due).is_sla_breached


def test_first_response_seconds_truncates():
    timings = TicketTimings(CREATED, CREATED + timedelta(seconds=59, milliseconds=900))
    assert timings.first_response_seconds(CREATED) == 59


def test_map_row_renames_and_passes_through():
    row = {"ticket_id": "T-1", "extra": 1}
    mapped = map_row(row, {"ticket_id": "ticketId"})
    assert mapped == {"ticketId": "T-1", "extra": 1}
    assert row == {"ticket_id": "T-1", "extra": 1}


def test_success_response_pagination_only_when_given():
    assert success_response([]) == {"success": True, "data": []}
    assert "pagination" in success_response([], pagination={"page": 1})
