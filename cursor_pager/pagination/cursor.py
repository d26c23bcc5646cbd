"""Opaque cursor tokens for cursor-based pagination."""

import base64
import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..errors.problem_details import DecodeError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Side of the current page a cursor points to."""
    
    NEXT = "next"
    PREV = "prev"


class Cursor(BaseModel):
    """Boundary value of an adjacent page and the side it is on.
    
    On the wire the direction is a boolean ``DirectionNext`` and the
    boundary value is ``Value``. Build cursors with ``Cursor.next`` and
    ``Cursor.prev``.
    """
    
    model_config = ConfigDict(frozen=True)
    
    direction: Direction = Field(alias="DirectionNext", description="Which adjacent page")
    value: str = Field(alias="Value", description="Boundary value of the adjacent page")
    
    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, v):
        """Accept the boolean wire form, or a Direction from Python code."""
        if isinstance(v, Direction):
            return v
        if isinstance(v, bool):
            return Direction.NEXT if v else Direction.PREV
        raise ValueError("DirectionNext must be a boolean")
    
    @field_serializer("direction")
    def serialize_direction(self, direction: Direction) -> bool:
        return direction is Direction.NEXT
    
    @classmethod
    def next(cls, value: str) -> "Cursor":
        return cls(DirectionNext=Direction.NEXT, Value=value)
    
    @classmethod
    def prev(cls, value: str) -> "Cursor":
        return cls(DirectionNext=Direction.PREV, Value=value)
    
    @property
    def is_next(self) -> bool:
        return self.direction is Direction.NEXT


def encode_cursor(cursor: Optional[Cursor]) -> str:
    """Encode a cursor into a base64 token.
    
    Args:
        cursor: Cursor to encode, or None
        
    Returns:
        Standard base64 (padded) of the compact JSON payload, or an empty
        string when there is no cursor or it cannot be serialized
    """
    if cursor is None:
        return ""
    
    try:
        cursor_json = cursor.model_dump_json(by_alias=True)
    except (ValueError, TypeError) as e:
        logger.warning(f"Failed to encode cursor: {e}")
        return ""
    
    return base64.b64encode(cursor_json.encode("utf-8")).decode("ascii")


def decode_cursor(token: str) -> Cursor:
    """Decode a base64 token back into a cursor.
    
    Args:
        token: Token produced by encode_cursor
        
    Returns:
        Decoded cursor
        
    Raises:
        DecodeError: If the token is empty, not valid base64, or does not
            hold a direction and a value
    """
    if not token:
        raise DecodeError("Empty cursor provided")
    
    try:
        cursor_bytes = base64.b64decode(token, validate=True)
    except ValueError as e:
        logger.info(f"Rejected cursor with invalid base64: {e}")
        raise DecodeError(f"Invalid cursor encoding: {e}")
    
    try:
        return Cursor.model_validate_json(cursor_bytes)
    except ValueError as e:
        logger.info(f"Rejected cursor with invalid payload: {e}")
        raise DecodeError(f"Invalid cursor format: {e}")
