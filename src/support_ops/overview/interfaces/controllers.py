"""
Overview Controllers (API Routes)
==================================

FastAPI routes for the dashboard reports. All of them require a
``[from, to)`` window.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from support_ops.infrastructure.database import QueryExecutor, get_executor
from support_ops.overview.application import (
    SERVICE_TREND_FIELDS,
    SUMMARY_FIELDS,
    SUPPORT_TREND_FIELDS,
    OverviewService,
)
from support_ops.shared.api.responses import (
    ApiResponse,
    ErrorResponse,
    map_row,
    map_rows,
    success_response,
)
from support_ops.shared.application import require_date_range

router = APIRouter(prefix="/api/overview", tags=["Overview"])

RANGE_ERRORS = {400: {"model": ErrorResponse, "description": "Missing or invalid from/to"}}

SUMMARY_EXAMPLE = {
    "success": True,
    "data": {
        "totalTickets": 1240,
        "ticketsClosed": 1013,
        "slaBreaches": 87,
        "avgFirstResponseSeconds": 2714,
        "p95FirstResponseSeconds": None,
        "totalErrorEvents": 392
    }
}


async def get_overview_service(
    executor: QueryExecutor = Depends(get_executor)
) -> OverviewService:
    """Get overview service instance."""
    return OverviewService(executor)


@router.get(
    "/summary",
    response_model=ApiResponse,
    summary="Overview summary",
    responses={
        200: {"content": {"application/json": {"example": SUMMARY_EXAMPLE}}},
        **RANGE_ERRORS,
    }
)
async def get_summary(
    from_: Optional[str] = Query(None, alias="from", description="Window start (ISO 8601)"),
    to: Optional[str] = Query(None, description="Window end, exclusive (ISO 8601)"),
    service: OverviewService = Depends(get_overview_service)
):
    window = require_date_range(from_, to)
    summary = await service.get_summary(window)
    return success_response(map_row(summary, SUMMARY_FIELDS))


@router.get(
    "/support-trend",
    response_model=ApiResponse,
    summary="Daily support trend",
    description="Tickets created, closed and SLA-breached per creation day.",
    responses=RANGE_ERRORS,
)
async def get_support_trend(
    from_: Optional[str] = Query(None, alias="from", description="Window start (ISO 8601)"),
    to: Optional[str] = Query(None, description="Window end, exclusive (ISO 8601)"),
    service: OverviewService = Depends(get_overview_service)
):
    window = require_date_range(from_, to)
    rows = await service.get_support_trend(window)
    return success_response(map_rows(rows, SUPPORT_TREND_FIELDS))


@router.get(
    "/service-trend",
    response_model=ApiResponse,
    summary="Daily service trend",
    description="Log events, ERROR events and p95 latency per day.",
    responses=RANGE_ERRORS,
)
async def get_service_trend(
    from_: Optional[str] = Query(None, alias="from", description="Window start (ISO 8601)"),
    to: Optional[str] = Query(None, description="Window end, exclusive (ISO 8601)"),
    service: OverviewService = Depends(get_overview_service)
):
    window = require_date_range(from_, to)
    rows = await service.get_service_trend(window)
    return success_response(map_rows(rows, SERVICE_TREND_FIELDS))


# Export router for inclusion in main app
overview_router = router
