"""
Shared response schemas - pagination, errors etc
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# largest OFFSET/LIMIT every backend accepts (signed 32-bit)
MAX_SQL_INT = 2**31 - 1


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


@dataclass(frozen=True)
class PageParams:
    """Validated page/limit pair."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit) if total else 0


def _positive_int(raw: Any, default: int) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if 1 <= value <= MAX_SQL_INT else default


def parse_pagination(
    page: Any = None,
    limit: Any = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: Optional[int] = None,
) -> PageParams:
    """Parse raw query values; anything malformed falls back to the defaults."""
    parsed_limit = _positive_int(limit, default_limit)
    if max_limit is not None:
        parsed_limit = min(parsed_limit, max_limit)
    parsed_page = _positive_int(page, DEFAULT_PAGE)
    if (parsed_page - 1) * parsed_limit > MAX_SQL_INT:
        parsed_page = DEFAULT_PAGE
    return PageParams(page=parsed_page, limit=parsed_limit)


class PaginatedResponse(CamelModel, Generic[T]):
    """List envelope used by the per-user listings."""

    success: bool = True
    count: int
    total: int
    total_pages: int
    current_page: int
    data: List[T]

    @classmethod
    def create(cls, items: List[T], total: int, params: PageParams) -> "PaginatedResponse[T]":
        return cls(
            count=len(items),
            total=total,
            total_pages=params.total_pages(total),
            current_page=params.page,
            data=items,
        )


class ErrorResponse(BaseModel):
    """Body of every error response."""

    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Additional error details")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"success": False, "error": "Note not found"},
        }
    )


class SuccessResponse(BaseModel):
    """Standard success response schema."""

    success: bool = Field(default=True, description="Operation success status")
    message: str = Field(description="Success message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"success": True, "message": "Note deleted successfully"},
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
