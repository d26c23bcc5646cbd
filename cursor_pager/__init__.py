"""Cursor-based pagination over already-fetched records."""

from .config import Settings, get_settings
from .errors import DecodeError, FieldNotFoundError, PaginationError
from .logging_config import configure_logging
from .pagination import (
    Cursor,
    Direction,
    Page,
    PaginatedResponse,
    PaginationParams,
    build_order_clause,
    build_page,
    build_where_clause,
    create_link_header,
    decode_cursor,
    encode_cursor,
    get_value,
    reverse
)

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "DecodeError",
    "FieldNotFoundError",
    "PaginationError",
    "configure_logging",
    "Cursor",
    "Direction",
    "Page",
    "PaginatedResponse",
    "PaginationParams",
    "build_order_clause",
    "build_page",
    "build_where_clause",
    "create_link_header",
    "decode_cursor",
    "encode_cursor",
    "get_value",
    "reverse"
]
