"""Problem Details (RFC 9457) errors raised by cursor-pager."""

from typing import Optional, Any
from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


class ProblemDetail(BaseModel):
    """Problem Details as defined in RFC 9457."""
    
    type: str = Field(default="about:blank", description="A URI reference that identifies the problem type")
    title: str = Field(description="A short, human-readable summary of the problem type")
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(default=None, description="A human-readable explanation specific to this occurrence")
    instance: Optional[str] = Field(default=None, description="A URI reference that identifies the specific occurrence")
    
    # Allow additional properties for extensions
    model_config = {"extra": "allow"}


class PaginationError(Exception):
    """Base exception for pagination failures.
    
    Carries enough information to be rendered as a Problem Details
    response by the API layer.
    """
    
    def __init__(
        self,
        status: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: str = "about:blank",
        instance: Optional[str] = None,
        **extensions: Any
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.type_uri = type_uri
        self.instance = instance
        self.extensions = extensions
        super().__init__(detail or title)
    
    def to_problem_detail(self, request: Optional[Request] = None) -> ProblemDetail:
        """Convert to ProblemDetail model."""
        instance = self.instance
        if instance is None and request:
            instance = str(request.url.path)
        
        return ProblemDetail(
            type=self.type_uri,
            title=self.title,
            status=self.status,
            detail=self.detail,
            instance=instance,
            **self.extensions
        )
    
    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to JSONResponse with Problem Details format."""
        problem = self.to_problem_detail(request)
        return JSONResponse(
            status_code=self.status,
            content=problem.model_dump(exclude_none=True),
            headers={"Content-Type": "application/problem+json"}
        )


class DecodeError(PaginationError):
    """400 error for a cursor token that cannot be decoded."""
    
    def __init__(self, detail: str = "Malformed cursor", **extensions: Any):
        super().__init__(
            status=400,
            title="Invalid Cursor",
            detail=detail,
            **extensions
        )


class FieldNotFoundError(PaginationError):
    """500 error for a boundary field missing from a record."""
    
    def __init__(self, field_name: str, detail: Optional[str] = None, **extensions: Any):
        self.field_name = field_name
        super().__init__(
            status=500,
            title="Boundary Field Not Found",
            detail=detail or f"field '{field_name}' does not exist",
            field_name=field_name,
            **extensions
        )


def create_problem_response(
    status: int,
    title: str,
    detail: Optional[str] = None,
    type_uri: str = "about:blank",
    instance: Optional[str] = None,
    request: Optional[Request] = None,
    **extensions: Any
) -> JSONResponse:
    """Create a Problem Details response."""
    if instance is None and request:
        instance = str(request.url.path)
    
    problem = ProblemDetail(
        type=type_uri,
        title=title,
        status=status,
        detail=detail,
        instance=instance,
        **extensions
    )
    
    return JSONResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
        headers={"Content-Type": "application/problem+json"}
    )
