"""Pagination module for cursor-based pagination."""

from .cursor import Cursor, Direction, encode_cursor, decode_cursor
from .page import Page, build_page, get_value, reverse
from .params import (
    PaginationParams,
    PaginatedResponse,
    build_where_clause,
    build_order_clause,
    create_link_header
)

__all__ = [
    "Cursor",
    "Direction",
    "encode_cursor",
    "decode_cursor",
    "Page",
    "build_page",
    "get_value",
    "reverse",
    "PaginationParams",
    "PaginatedResponse",
    "build_where_clause",
    "build_order_clause",
    "create_link_header"
]
