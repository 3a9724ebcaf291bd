"""Application services against a FakeExecutor."""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from support_ops.core import ResourceNotFoundException
from support_ops.logs.application import LogsService
from support_ops.overview.application import OverviewService
from support_ops.shared.application import DateRange, Pagination
from support_ops.tickets.application import TicketListFilters, TicketService

from tests.conftest import FIXED_NOW, FakeExecutor, compile_pg

WINDOW = DateRange(
    start=datetime(2024, 1, 1, tzinfo=timezone.utc),
    end=datetime(2024, 2, 1, tzinfo=timezone.utc),
)


# ========== Tickets ==========

class TestTicketService:
    async def test_list_runs_count_then_page(self, fixed_clock):
        rows = [{"ticket_id": "T-2"}, {"ticket_id": "T-1"}]
        executor = FakeExecutor({"total": 52}, rows)
        service = TicketService(executor, clock=fixed_clock)

        page = await service.list_tickets(TicketListFilters(), Pagination.from_params("1", "25"))

        assert page.rows == rows
        assert page.pagination_info == {"page": 1, "pageSize": 25, "total": 52, "totalPages": 3}
        assert len(executor.statements) == 2

    async def test_page_past_end_keeps_total(self, fixed_clock):
        executor = FakeExecutor({"total": 3}, [])
        service = TicketService(executor, clock=fixed_clock)

        page = await service.list_tickets(TicketListFilters(), Pagination.from_params("9", "25"))

        assert page.rows == []
        assert page.total == 3
        # Only the count ran
        assert len(executor.statements) == 1

    async def test_page_beyond_bigint_offset_is_empty(self, fixed_clock):
        executor = FakeExecutor({"total": 3})
        service = TicketService(executor, clock=fixed_clock)
        pagination = Pagination.from_params("99999999999999999999", "100")

        page = await service.list_tickets(TicketListFilters(), pagination)

        assert page.rows == []
        assert page.pagination_info["total"] == 3
        assert len(executor.statements) == 1

    async def test_detail_adds_sla_facts(self, fixed_clock):
        created = FIXED_NOW - timedelta(hours=2)
        executor = FakeExecutor({
            "ticket_id": "T-1",
            "created_at": created,
            "first_response_at": created + timedelta(minutes=45),
            "sla_due_at": created + timedelta(minutes=30),
        })
        service = TicketService(executor, clock=fixed_clock)

        ticket = await service.get_ticket_detail("T-1")

        assert ticket["first_response_seconds"] == 45 * 60
        assert ticket["sla_breached"] is True

    async def test_detail_of_unanswered_ticket_measures_to_now(self, fixed_clock):
        created = FIXED_NOW - timedelta(seconds=90)
        executor = FakeExecutor({"ticket_id": "T-1", "created_at": created})
        service = TicketService(executor, clock=fixed_clock)

        ticket = await service.get_ticket_detail("T-1")

        assert ticket["first_response_seconds"] == 90
        assert ticket["sla_breached"] is False

    async def test_detail_not_found(self):
        service = TicketService(FakeExecutor(None))
        with pytest.raises(ResourceNotFoundException) as excinfo:
            await service.get_ticket_detail("T-404")
        assert excinfo.value.message == "Ticket with ID T-404 not found"

    async def test_history_of_unknown_ticket_is_empty(self):
        service = TicketService(FakeExecutor([], []))
        assert await service.get_ticket_events("T-404") == []
        assert await service.get_ticket_messages("T-404") == []


# ========== Overview ==========

class TestOverviewService:
    async def test_summary_merges_two_queries(self, fixed_clock):
        executor = FakeExecutor(
            {
                "total_tickets": 10,
                "tickets_closed": 6,
                "sla_breaches": 2,
                "avg_first_response_seconds": Decimal("1834"),
            },
            {"total_error_events": 17},
        )
        service = OverviewService(executor, clock=fixed_clock)

        summary = await service.get_summary(WINDOW)

        assert summary == {
            "total_tickets": 10,
            "tickets_closed": 6,
            "sla_breaches": 2,
            "avg_first_response_seconds": 1834,
            "p95_first_response_seconds": None,
            "total_error_events": 17,
        }
        assert len(executor.statements) == 2

    async def test_summary_of_empty_window(self):
        executor = FakeExecutor(
            {"total_tickets": 0, "tickets_closed": 0, "sla_breaches": 0,
             "avg_first_response_seconds": None},
            {"total_error_events": 0},
        )
        summary = await OverviewService(executor).get_summary(WINDOW)
        assert summary["avg_first_response_seconds"] is None
        assert summary["total_tickets"] == 0

    async def test_support_trend(self):
        executor = FakeExecutor([
            {"date": date(2024, 1, 1), "tickets_created": 4, "tickets_closed": 1, "sla_breaches": 0},
        ])
        trend = await OverviewService(executor).get_support_trend(WINDOW)
        assert trend == [
            {"date": date(2024, 1, 1), "tickets_created": 4, "tickets_closed": 1, "sla_breaches": 0},
        ]

    async def test_service_trend_single_grouped_statement(self):
        executor = FakeExecutor([
            {"date": date(2024, 1, 1), "total_events": 6, "error_events": 1,
             "p95_latency_ms": 50},
            {"date": date(2024, 1, 3), "total_events": 2, "error_events": 2,
             "p95_latency_ms": 7},
        ])

        trend = await OverviewService(executor, percentile=95).get_service_trend(WINDOW)

        assert trend == [
            {"date": date(2024, 1, 1), "total_events": 6, "error_events": 1, "p95_latency_ms": 50},
            {"date": date(2024, 1, 3), "total_events": 2, "error_events": 2, "p95_latency_ms": 7},
        ]
        assert len(executor.statements) == 1
        _, params = compile_pg(executor.statements[0])
        assert params["percentile"] == 0.95

    async def test_service_trend_empty_window(self):
        executor = FakeExecutor([])
        assert await OverviewService(executor).get_service_trend(WINDOW) == []


# ========== Logs ==========

class TestLogsService:
    async def test_top_errors_counts_are_ints(self):
        executor = FakeExecutor([
            {
                "error_signature": "TimeoutError: upstream",
                "service_name": "payments-api",
                "error_count": 42,
                "last_occurrence": FIXED_NOW,
                "days_with_errors": 3,
            }
        ])
        rows = await LogsService(executor).get_top_errors(WINDOW, "payments-api")
        assert rows[0]["error_count"] == 42
        assert rows[0]["days_with_errors"] == 3

    async def test_latency_trend_reads_percentile_from_grouped_row(self):
        hour = "2024-01-01 10:00:00"
        executor = FakeExecutor([
            {
                "hour_start": hour,
                "service_name": "payments-api",
                "endpoint": "/v1/charges",
                "p95_latency_ms": 50,
                "avg_latency_ms": Decimal("30.00"),
                "max_latency_ms": 50,
                "request_count": 5,
            }
        ])

        trend = await LogsService(executor, percentile=99).get_latency_trend(WINDOW)

        assert trend == [
            {
                "hour_start": hour,
                "service_name": "payments-api",
                "endpoint": "/v1/charges",
                "p95_latency_ms": 50,
                "avg_latency_ms": 30.0,
                "max_latency_ms": 50,
                "request_count": 5,
            }
        ]
        assert len(executor.statements) == 1
        _, params = compile_pg(executor.statements[0])
        assert params["percentile"] == 0.99
