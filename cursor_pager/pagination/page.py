"""Page construction from an over-fetched slice of records."""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors.problem_details import FieldNotFoundError
from .cursor import Cursor, encode_cursor

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A field/attribute name, or a callable returning the boundary value
BoundaryField = Union[str, Callable[[Any], Any]]

# Values that are never treated as records
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, list, set, frozenset)

_MISSING = object()


class Page(BaseModel, Generic[T]):
    """One page of results plus the cursors of its neighbours.
    
    ``total`` counts the records returned by this call, not the size of
    the underlying table.
    """
    
    model_config = ConfigDict(frozen=True)
    
    total: int = Field(description="Number of records in this page")
    limit: int = Field(description="Requested page size")
    prev_cursor: Optional[Cursor] = Field(default=None, description="Cursor for previous page")
    next_cursor: Optional[Cursor] = Field(default=None, description="Cursor for next page")
    results: List[T] = Field(default_factory=list, description="Records of this page")
    encoded_prev_cursor: str = Field(default="", description="Encoded previous page cursor")
    encoded_next_cursor: str = Field(default="", description="Encoded next page cursor")
    
    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None
    
    @property
    def has_prev(self) -> bool:
        return self.prev_cursor is not None
    
    def get_cursors(self) -> Tuple[str, str]:
        """Return the raw (prev, next) boundary values, empty when absent."""
        prev = self.prev_cursor.value if self.prev_cursor else ""
        next_ = self.next_cursor.value if self.next_cursor else ""
        return prev, next_
    
    def encoded_cursors(self) -> Tuple[str, str]:
        """Return the (prev, next) tokens for inclusion in a response."""
        return self.encoded_prev_cursor, self.encoded_next_cursor


def get_value(record: Any, field: BoundaryField) -> str:
    """Read the boundary value off a record as a string.
    
    Mappings are looked up by key, other objects by attribute. The value
    is formatted with ``str()``, so callers must make sure that form
    compares the way their data store compares the column.
    
    Raises:
        FieldNotFoundError: If the record is not a record-like value or
            has no such field
    """
    if callable(field):
        name = getattr(field, "__name__", repr(field))
        try:
            value = field(record)
        except (AttributeError, KeyError, IndexError, TypeError) as e:
            raise FieldNotFoundError(name, f"extractor '{name}' failed: {e}")
        return str(value)
    
    if record is None or isinstance(record, _SCALAR_TYPES) or _is_plain_tuple(record):
        raise FieldNotFoundError(field, f"expected a record, got {type(record).__name__}")
    
    if isinstance(record, Mapping):
        value = record.get(field, _MISSING)
    else:
        value = getattr(record, field, _MISSING)
    
    if value is _MISSING:
        raise FieldNotFoundError(field)
    
    return str(value)


def build_page(
    records: Optional[Sequence[T]],
    limit: int,
    boundary_field: BoundaryField,
    incoming_boundary_value: str = ""
) -> Page[T]:
    """Build a page from records fetched with the over-fetch convention.
    
    The caller fetches ``limit + 1`` records when more may exist. The
    extra record is the sentinel for the next page and is not returned.
    A previous cursor is only produced when the request came in with a
    cursor, i.e. this is not the first page.
    
    Args:
        records: Records ordered by the boundary field
        limit: Requested page size
        boundary_field: Field name or extractor for the boundary value
        incoming_boundary_value: Value of the decoded incoming cursor, or
            an empty string on the first page
        
    Returns:
        The assembled page
        
    Raises:
        FieldNotFoundError: If the boundary value cannot be read
    """
    records = list(records) if records else []
    total = len(records)
    results = records
    
    # A next cursor only exists when there are more results
    next_cursor = None
    cut = max(limit, 0)
    if len(records) > cut:
        total = limit
        results = records[:cut]
        next_cursor = Cursor.next(_boundary_value(records[cut], boundary_field))
    
    # A prev cursor only exists when not on the first page and there are results
    prev_cursor = None
    if incoming_boundary_value != "" and results:
        prev_cursor = Cursor.prev(_boundary_value(results[0], boundary_field))
    
    logger.debug(
        f"Built page with {total} of {len(records)} records",
        extra={"limit": limit, "has_next": next_cursor is not None, "has_prev": prev_cursor is not None}
    )
    
    return Page(
        total=total,
        limit=limit,
        prev_cursor=prev_cursor,
        next_cursor=next_cursor,
        results=results,
        encoded_prev_cursor=encode_cursor(prev_cursor),
        encoded_next_cursor=encode_cursor(next_cursor),
    )


def _is_plain_tuple(record: Any) -> bool:
    return isinstance(record, tuple) and not hasattr(record, "_fields")


def _boundary_value(record: Any, field: BoundaryField) -> str:
    try:
        return get_value(record, field)
    except FieldNotFoundError as e:
        logger.error(f"Cannot read boundary field: {e}")
        raise


def reverse(s: Sequence[T]) -> List[T]:
    """Return a new list with the elements of ``s`` in reverse order.
    
    Used to put rows fetched in reverse scan order (previous page) back
    into forward order before building a page.
    """
    return list(reversed(s))
