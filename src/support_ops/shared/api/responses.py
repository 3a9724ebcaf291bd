"""
Response Envelope
=================

Every endpoint answers with the same JSON envelope:

    {"success": true, "data": ..., "pagination": {...}}     # success
    {"success": false, "error": "...", "message": "..."}    # failure

Rows coming back from the store use storage-style column names; each
endpoint renames them with a static field map before they leave the API.
"""

from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

FieldMap = Mapping[str, str]


def map_row(row: Mapping[str, Any], field_map: FieldMap) -> dict[str, Any]:
    """
    Rename the keys of one row using ``field_map``.

    Returns a new dict; keys without an entry in the map are kept as-is.
    """
    return {field_map.get(key, key): value for key, value in row.items()}


def map_rows(rows: Iterable[Mapping[str, Any]], field_map: FieldMap) -> list[dict[str, Any]]:
    return [map_row(row, field_map) for row in rows]


# ========== Envelope Models ==========

class PaginationInfo(BaseModel):
    """Pagination block of list responses."""
    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(..., ge=1)
    page_size: int = Field(..., alias="pageSize", ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., alias="totalPages", ge=0)


class ApiResponse(BaseModel):
    """Success envelope."""
    success: bool = True
    data: Any = None


class PaginatedResponse(ApiResponse):
    """Success envelope with pagination."""
    pagination: PaginationInfo


class ErrorResponse(BaseModel):
    """Failure envelope."""
    success: bool = False
    error: str
    message: str


def success_response(data: Any, pagination: Optional[Mapping[str, int]] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True, "data": data}
    if pagination is not None:
        body["pagination"] = dict(pagination)
    return body


def error_response(category: str, message: str) -> dict[str, Any]:
    return {"success": False, "error": category, "message": message}
