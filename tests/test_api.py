"""HTTP surface: envelopes, status codes and parameter handling."""
from datetime import date, datetime, timedelta, timezone

from support_ops.core import DatabaseUnavailableException, QueryTimeoutException

from tests.conftest import compile_pg


# ========== Health / Root ==========

async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "timestamp" in body


async def test_root_lists_endpoints(client):
    response = await client.get("/")
    body = response.json()
    assert body["success"] is True
    assert body["health"] == "/health"
    assert "GET /api/logs/errors/top?from=&to=&service=" in body["endpoints"]


async def test_unknown_route(client):
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Not found",
        "message": "Route /api/nothing-here not found",
    }


async def test_correlation_id_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


# ========== Tickets ==========

async def test_list_tickets_envelope(client, executor):
    executor.queue(
        {"total": 1},
        [{
            "ticket_id": "T-1",
            "issue_type": "refund_delay",
            "created_at": datetime(2024, 1, 15, 10, tzinfo=timezone.utc),
            "first_response_seconds": 120,
        }],
    )

    response = await client.get("/api/tickets", params={"status": "open", "pageSize": "10"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"][0]["ticketId"] == "T-1"
    assert body["data"][0]["issueType"] == "refund_delay"
    assert body["data"][0]["firstResponseSeconds"] == 120
    assert body["pagination"] == {"page": 1, "pageSize": 10, "total": 1, "totalPages": 1}


async def test_list_tickets_page_size_capped(client, executor):
    executor.queue({"total": 0}, [])
    response = await client.get("/api/tickets", params={"pageSize": "1000"})
    assert response.json()["pagination"]["pageSize"] == 100


async def test_list_tickets_page_past_end(client, executor):
    executor.queue({"total": 3}, [])
    response = await client.get("/api/tickets", params={"page": "5"})
    body = response.json()
    assert body["data"] == []
    assert body["pagination"]["total"] == 3
    assert body["pagination"]["page"] == 5


async def test_list_tickets_huge_page_is_empty_not_an_error(client, executor):
    executor.queue({"total": 3})
    response = await client.get("/api/tickets", params={"page": "99999999999999999999"})

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["pagination"]["total"] == 3
    assert len(executor.statements) == 1


async def test_list_tickets_enum_filters_case_insensitive(client, executor):
    executor.queue({"total": 0}, {"total": 0})
    window = {"from": "2024-01-01", "to": "2024-02-01"}

    await client.get("/api/tickets", params={"status": "closed", "channel": " Email ", **window})
    await client.get("/api/tickets", params={"status": "CLOSED", "channel": "EMAIL", **window})

    lower, upper = (compile_pg(statement) for statement in executor.statements)
    assert lower == upper
    assert "CLOSED" in lower[1].values()
    assert "EMAIL" in lower[1].values()


async def test_list_tickets_default_window_is_trailing_thirty_days(client, executor):
    executor.queue({"total": 0})
    before = datetime.now(timezone.utc)

    await client.get("/api/tickets")

    after = datetime.now(timezone.utc)
    sql, params = compile_pg(executor.statements[0])
    start, end = sorted(v for v in params.values() if isinstance(v, datetime))
    assert "tickets.created_at >=" in sql
    assert end - start == timedelta(days=30)
    assert before <= end <= after


async def test_list_tickets_invalid_date(client):
    response = await client.get("/api/tickets", params={"from": "yesterday"})
    assert response.status_code == 400
    assert response.json()["error"] == "Bad request"


async def test_ticket_not_found(client, executor):
    executor.queue(None)
    response = await client.get("/api/tickets/T-404")
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Not found",
        "message": "Ticket with ID T-404 not found",
    }


async def test_ticket_detail_fields(client, executor):
    created = datetime(2024, 1, 15, 10, tzinfo=timezone.utc)
    executor.queue({
        "ticket_id": "T-1",
        "created_at": created,
        "first_response_at": datetime(2024, 1, 15, 11, tzinfo=timezone.utc),
        "sla_due_at": datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    })

    data = (await client.get("/api/tickets/T-1")).json()["data"]

    assert data["firstResponseSeconds"] == 3600
    assert data["slaBreached"] is True
    assert data["slaDueAt"].startswith("2024-01-15T10:30:00")


async def test_ticket_events_empty(client, executor):
    executor.queue([])
    response = await client.get("/api/tickets/T-1/events")
    assert response.json() == {"success": True, "data": []}


# ========== Overview ==========

async def test_summary_requires_range(client):
    response = await client.get("/api/overview/summary", params={"from": "2024-01-01"})
    assert response.status_code == 400
    assert "from and to" in response.json()["message"]


async def test_summary_rejects_reversed_range(client):
    response = await client.get(
        "/api/overview/summary", params={"from": "2024-02-01", "to": "2024-01-01"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == 'Parameter "from" must be before "to"'


async def test_summary_fields(client, executor):
    executor.queue(
        {"total_tickets": 3, "tickets_closed": 1, "sla_breaches": 1,
         "avg_first_response_seconds": 60},
        {"total_error_events": 9},
    )

    response = await client.get(
        "/api/overview/summary", params={"from": "2024-01-01", "to": "2024-02-01"}
    )

    assert response.json()["data"] == {
        "totalTickets": 3,
        "ticketsClosed": 1,
        "slaBreaches": 1,
        "avgFirstResponseSeconds": 60,
        "p95FirstResponseSeconds": None,
        "totalErrorEvents": 9,
    }


async def test_support_trend_fields(client, executor):
    executor.queue([
        {"date": date(2024, 1, 1), "tickets_created": 2, "tickets_closed": 1, "sla_breaches": 0}
    ])
    response = await client.get(
        "/api/overview/support-trend", params={"from": "2024-01-01", "to": "2024-01-02"}
    )
    assert response.json()["data"] == [
        {"date": "2024-01-01", "ticketsCreated": 2, "ticketsClosed": 1, "slaBreaches": 0}
    ]


# ========== Logs ==========

async def test_top_errors_fields(client, executor):
    executor.queue([{
        "error_signature": "ConnectionResetError",
        "service_name": "payments-api",
        "error_count": 5,
        "last_occurrence": datetime(2024, 1, 3, tzinfo=timezone.utc),
        "days_with_errors": 2,
    }])

    response = await client.get(
        "/api/logs/errors/top",
        params={"from": "2024-01-01", "to": "2024-02-01", "service": "payments-api"},
    )

    row = response.json()["data"][0]
    assert row["errorSignature"] == "ConnectionResetError"
    assert row["errorCount"] == 5
    assert row["daysWithErrors"] == 2


async def test_latency_trend_requires_range(client):
    response = await client.get("/api/logs/latency/trend")
    assert response.status_code == 400


# ========== Store failures ==========

async def test_database_unavailable(client, executor):
    executor.error = DatabaseUnavailableException()
    response = await client.get(
        "/api/overview/summary", params={"from": "2024-01-01", "to": "2024-02-01"}
    )
    assert response.status_code == 500
    assert response.json()["error"] == "Database connection failed"


async def test_query_timeout(client, executor):
    executor.error = QueryTimeoutException()
    response = await client.get(
        "/api/logs/errors/top", params={"from": "2024-01-01", "to": "2024-02-01"}
    )
    assert response.status_code == 504
    assert response.json() == {
        "success": False,
        "error": "Request timeout",
        "message": "Database query exceeded timeout limit",
    }
