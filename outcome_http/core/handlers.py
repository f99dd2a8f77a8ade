"""
FastAPI exception handlers.

Request validation failures and unhandled exceptions are turned into
`ErrorInfo` values and sent through the same mapping engine as endpoint
outcomes, so every error response is application/problem+json.
No stack traces or internal details are exposed to clients.
"""
from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import Response

from outcome_http.core.config import settings
from outcome_http.core.dependencies import get_outcome_mapper, get_request_context
from outcome_http.schemas.outcome import EndpointOutcome, ErrorCategory, ErrorInfo, Outcome
from outcome_http.services.http_mapper import render_response

logger = logging.getLogger(__name__)


def _respond(request: Request, error: ErrorInfo) -> Response:
    context = get_request_context(request)
    transport = get_outcome_mapper().map(EndpointOutcome(Outcome.failure(error)), context)
    response = render_response(transport)
    # ServerErrorMiddleware sits outside TraceIdMiddleware, so echo the id here.
    response.headers[settings.TRACE_ID_HEADER] = context.trace_id
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """Return a 400 problem with one inner error per invalid field."""
    field_errors = [
        ErrorInfo(
            category=ErrorCategory.validation,
            code=error["type"],
            message=error["msg"],
            extensions={"field": ".".join(str(loc) for loc in error["loc"] if loc != "body")},
        )
        for error in exc.errors()
    ]
    logger.info("Request validation failed on %s: %d error(s)", request.url.path, len(field_errors))
    return _respond(
        request,
        ErrorInfo(
            category=ErrorCategory.validation,
            code="VALIDATION_ERROR",
            message="Request validation failed.",
            inner_errors=field_errors,
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return _respond(
        request,
        ErrorInfo(
            category=ErrorCategory.internal_server_error,
            code="INTERNAL_ERROR",
            message="An unexpected error occurred.",
        ),
    )
