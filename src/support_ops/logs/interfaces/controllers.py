"""
Service Log Controllers (API Routes)
=====================================

FastAPI routes for the error and latency reports.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from support_ops.infrastructure.database import QueryExecutor, get_executor
from support_ops.logs.application import LATENCY_TREND_FIELDS, TOP_ERROR_FIELDS, LogsService
from support_ops.shared.api.responses import ApiResponse, ErrorResponse, map_rows, success_response
from support_ops.shared.application import normalize_text, require_date_range

router = APIRouter(prefix="/api/logs", tags=["Logs"])

RANGE_ERRORS = {400: {"model": ErrorResponse, "description": "Missing or invalid from/to"}}


async def get_logs_service(
    executor: QueryExecutor = Depends(get_executor)
) -> LogsService:
    """Get logs service instance."""
    return LogsService(executor)


@router.get(
    "/errors/top",
    response_model=ApiResponse,
    summary="Top error signatures",
    description="""
    Up to 20 ERROR-level signatures in `[from, to)`, most frequent first.

    Optionally restricted to one `service`.
    """,
    responses=RANGE_ERRORS,
)
async def get_top_errors(
    from_: Optional[str] = Query(None, alias="from", description="Window start (ISO 8601)"),
    to: Optional[str] = Query(None, description="Window end, exclusive (ISO 8601)"),
    service_name: Optional[str] = Query(None, alias="service", description="Service name"),
    service: LogsService = Depends(get_logs_service)
):
    window = require_date_range(from_, to)
    rows = await service.get_top_errors(window, normalize_text(service_name))
    return success_response(map_rows(rows, TOP_ERROR_FIELDS))


@router.get(
    "/latency/trend",
    response_model=ApiResponse,
    summary="Hourly latency trend",
    description="""
    p95 (nearest rank), average and max latency with request counts per
    hour, service and endpoint. Events without latency are ignored.
    """,
    responses=RANGE_ERRORS,
)
async def get_latency_trend(
    from_: Optional[str] = Query(None, alias="from", description="Window start (ISO 8601)"),
    to: Optional[str] = Query(None, description="Window end, exclusive (ISO 8601)"),
    service_name: Optional[str] = Query(None, alias="service", description="Service name"),
    endpoint: Optional[str] = Query(None, description="Endpoint path"),
    service: LogsService = Depends(get_logs_service)
):
    window = require_date_range(from_, to)
    rows = await service.get_latency_trend(
        window,
        service=normalize_text(service_name),
        endpoint=normalize_text(endpoint),
    )
    return success_response(map_rows(rows, LATENCY_TREND_FIELDS))


# Export router for inclusion in main app
logs_router = router
