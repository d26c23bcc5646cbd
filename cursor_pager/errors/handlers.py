"""FastAPI exception handlers for pagination errors."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .problem_details import PaginationError, create_problem_response

logger = logging.getLogger(__name__)


async def pagination_exception_handler(
    request: Request,
    exc: PaginationError
) -> JSONResponse:
    """Handle PaginationError instances."""
    log = logger.error if exc.status >= 500 else logger.info
    log(
        f"Pagination error: {exc.status} - {exc.title}",
        extra={
            "status_code": exc.status,
            "path": str(request.url.path),
            "method": request.method,
            "detail": exc.detail
        }
    )
    return exc.to_response(request)


async def pydantic_validation_exception_handler(
    request: Request,
    exc: ValidationError
) -> JSONResponse:
    """Handle validation errors raised while building pagination parameters."""
    logger.info(
        f"Pagination parameter validation error: {exc.error_count()} errors",
        extra={
            "path": str(request.url.path),
            "method": request.method,
        }
    )
    
    error_messages = []
    for error in exc.errors():
        loc = " -> ".join(str(x) for x in error["loc"])
        error_messages.append(f"{loc}: {error['msg']}")
    
    return create_problem_response(
        status=400,
        title="Validation Error",
        detail="Invalid pagination parameters: " + "; ".join(error_messages),
        request=request,
        validation_errors=exc.errors(include_url=False, include_context=False, include_input=False)
    )


def register_exception_handlers(app):
    """Register the pagination exception handlers with a FastAPI app."""
    app.add_exception_handler(PaginationError, pagination_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
