"""Shared route dependencies."""

from typing import Optional

from fastapi import Depends, Query

from ..config import Settings, get_settings
from ..core.schemas.common import PageParams, parse_pagination


def get_page_params(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Page size, defaults to 10"),
    settings: Settings = Depends(get_settings),
) -> PageParams:
    """Raw strings so a malformed value falls back to the default instead of a 422."""
    return parse_pagination(
        page, limit, default_limit=settings.default_page_size, max_limit=settings.max_page_size
    )
