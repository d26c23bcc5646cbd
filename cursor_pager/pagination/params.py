"""Helpers for the layers around the page builder.

The data-fetch layer uses ``PaginationParams`` and the clause builders to
select ``limit + 1`` rows past the incoming cursor. The API layer turns the
resulting page into a ``PaginatedResponse`` and a ``Link`` header.
"""

import re
from typing import Optional, Dict, Any, List, Generic, Sequence, Tuple, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, Field, field_validator

from ..config import get_settings
from .cursor import Cursor, Direction, decode_cursor
from .page import Page, reverse

T = TypeVar("T")

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class PaginationParams(BaseModel):
    """Query parameters for pagination."""
    
    limit: int = Field(
        default_factory=lambda: get_settings().default_page_size,
        ge=1,
        description="Number of items per page"
    )
    cursor: Optional[str] = Field(default=None, description="Cursor for pagination")
    
    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v):
        """Cap the page size at the configured maximum."""
        max_page_size = get_settings().max_page_size
        if v > max_page_size:
            raise ValueError(f"limit must not exceed {max_page_size}")
        return v
    
    @property
    def fetch_limit(self) -> int:
        """Number of rows to fetch so the next page can be detected."""
        return self.limit + 1
    
    def decoded_cursor(self) -> Optional[Cursor]:
        """Decode the incoming cursor, None on the first page.
        
        Raises:
            DecodeError: If the cursor is malformed
        """
        if not self.cursor:
            return None
        return decode_cursor(self.cursor)
    
    def boundary_value(self) -> str:
        """Boundary value to hand to build_page, empty on the first page."""
        cursor = self.decoded_cursor()
        return cursor.value if cursor else ""
    
    def page_rows(self, rows: Sequence[T]) -> List[T]:
        """Put fetched rows into forward order for build_page.
        
        A previous page is scanned backwards from the cursor, so the
        over-fetched row of that scan is the earliest one. It is dropped
        before the rows are reversed; a backward step therefore builds a
        page without a next cursor, the incoming cursor value being the
        start of the page that was left.
        
        Raises:
            DecodeError: If the cursor is malformed
        """
        cursor = self.decoded_cursor()
        if cursor is None or cursor.is_next:
            return list(rows)
        return reverse(list(rows)[:self.limit])


class PaginatedResponse(BaseModel, Generic[T]):
    """Response model for paginated data."""
    
    items: List[T] = Field(description="List of items")
    total: int = Field(description="Number of items in this page")
    limit: int = Field(description="Requested page size")
    prev_cursor: Optional[str] = Field(default=None, description="Cursor for previous page")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for next page")
    has_more: bool = Field(description="Whether more items are available")
    
    @classmethod
    def from_page(cls, page: Page) -> "PaginatedResponse":
        prev_cursor, next_cursor = page.encoded_cursors()
        return cls(
            items=page.results,
            total=page.total,
            limit=page.limit,
            prev_cursor=prev_cursor or None,
            next_cursor=next_cursor or None,
            has_more=page.has_next
        )


def _check_column(column: str) -> str:
    if not _IDENTIFIER.match(column):
        raise ValueError(f"Invalid column name: {column!r}")
    return column


def build_where_clause(
    column: str,
    cursor: Optional[Cursor] = None,
    param_index: int = 1
) -> Tuple[str, List[Any]]:
    """Build the keyset predicate for a decoded cursor.
    
    Args:
        column: Boundary column name
        cursor: Decoded incoming cursor, None on the first page
        param_index: Position of the placeholder in the full query
        
    Returns:
        Tuple of (where_clause, parameters); empty when there is no cursor
        
    Raises:
        ValueError: If the column is not a plain SQL identifier
    """
    column = _check_column(column)
    if cursor is None:
        return "", []
    
    # The next cursor holds the first row of the next page, the prev cursor
    # the first row of the current one
    operator = ">=" if cursor.direction is Direction.NEXT else "<"
    return f"{column} {operator} ${param_index}", [cursor.value]


def build_order_clause(column: str, cursor: Optional[Cursor] = None) -> str:
    """Build ORDER BY clause for a keyset query.
    
    Previous pages are scanned backwards; pass the fetched rows through
    ``PaginationParams.page_rows`` before building the page.
    """
    column = _check_column(column)
    if cursor is not None and cursor.direction is Direction.PREV:
        return f"ORDER BY {column} DESC"
    return f"ORDER BY {column} ASC"


def create_link_header(
    base_url: str,
    params: Dict[str, Any],
    next_cursor: Optional[str] = None,
    prev_cursor: Optional[str] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.
    
    Args:
        base_url: Base URL for the resource
        params: Current query parameters
        next_cursor: Cursor for next page
        prev_cursor: Cursor for previous page
        
    Returns:
        Link header value or None if no links
    """
    links = []
    
    if next_cursor:
        next_params = {**params, "cursor": next_cursor}
        links.append(f'<{base_url}?{urlencode(next_params)}>; rel="next"')
    
    if prev_cursor:
        prev_params = {**params, "cursor": prev_cursor}
        links.append(f'<{base_url}?{urlencode(prev_params)}>; rel="prev"')
    
    return ", ".join(links) if links else None
