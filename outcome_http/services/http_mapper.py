"""
OutcomeToHttpMapper: EndpointOutcome + request context -> TransportResponse.

Decision order, first match wins:
  1. success carrying UNIT      -> status override or 204, no body
  2. success carrying a value   -> status override or 200, body = value
  3. failure with a precomputed problem -> that problem, mapper not called
  4. failure                    -> first error (or none) through ProblemDetailsMapper
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette import status
from starlette.responses import Response

from outcome_http.core.errors import InvalidArgumentError
from outcome_http.schemas.outcome import UNIT, EndpointOutcome
from outcome_http.schemas.problem import PROBLEM_MEDIA_TYPE, ProblemDescription, RequestContext
from outcome_http.services.problem_details import ProblemDetailsMapper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """What to send: the framework decides how to write it."""
    status_code: int
    body: Any = None
    media_type: Optional[str] = None

    @property
    def is_problem(self) -> bool:
        return isinstance(self.body, ProblemDescription)

    @property
    def has_body(self) -> bool:
        return self.media_type is not None


class OutcomeToHttpMapper:
    def __init__(self, problem_mapper: Optional[ProblemDetailsMapper] = None):
        self.problem_mapper = problem_mapper or ProblemDetailsMapper()

    def map(self, outcome: Optional[EndpointOutcome[Any]], context: Optional[RequestContext]) -> TransportResponse:
        if outcome is None:
            raise InvalidArgumentError("outcome")
        if context is None:
            raise InvalidArgumentError("context")

        result = outcome.outcome
        transport = outcome.transport

        if result.is_success:
            value = result.value
            if value is UNIT:
                return TransportResponse(_status_or(transport.status_override, status.HTTP_204_NO_CONTENT))
            return TransportResponse(
                _status_or(transport.status_override, status.HTTP_200_OK),
                body=value,
                media_type="application/json",
            )

        if transport.precomputed_problem is not None:
            logger.debug("Using precomputed problem for %s", context.path)
            return _problem_response(transport.precomputed_problem)

        first_error = result.errors[0] if result.errors else None
        return _problem_response(self.problem_mapper.map(first_error, context))


def _status_or(override: Optional[int], default: int) -> int:
    return default if override is None else override


def _problem_response(problem: ProblemDescription) -> TransportResponse:
    return TransportResponse(problem.status, body=problem, media_type=PROBLEM_MEDIA_TYPE)


def render_response(transport: TransportResponse) -> Response:
    """Turn a TransportResponse into the Starlette response written to the wire."""
    if not transport.has_body:
        return Response(status_code=transport.status_code)
    if transport.is_problem:
        return JSONResponse(
            status_code=transport.status_code,
            content=transport.body.to_dict(),
            media_type=PROBLEM_MEDIA_TYPE,
        )
    return JSONResponse(
        status_code=transport.status_code,
        content=jsonable_encoder(transport.body),
    )
