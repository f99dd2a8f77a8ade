"""
FastAPI dependency providers for the mapping engine.

Mappers are stateless, so one process-wide instance of each is shared.
Override any of them per app with `app.dependency_overrides`.
"""
from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Any

from fastapi import Depends, Request
from starlette.responses import Response

from outcome_http.core.config import settings
from outcome_http.schemas.outcome import EndpointOutcome, Outcome
from outcome_http.schemas.problem import RequestContext
from outcome_http.services.http_mapper import OutcomeToHttpMapper, render_response
from outcome_http.services.problem_details import ProblemDetailsMapper
from outcome_http.services.problem_type_uri import ProblemTypeUriGenerator


@lru_cache
def get_problem_type_uri_generator() -> ProblemTypeUriGenerator:
    return ProblemTypeUriGenerator(settings.PROBLEM_TYPE_BASE_URI)


@lru_cache
def get_problem_details_mapper() -> ProblemDetailsMapper:
    return ProblemDetailsMapper(get_problem_type_uri_generator())


@lru_cache
def get_outcome_mapper() -> OutcomeToHttpMapper:
    return OutcomeToHttpMapper(get_problem_details_mapper())


def get_request_context(request: Request) -> RequestContext:
    trace_id = getattr(request.state, "trace_id", None)
    if not trace_id:
        trace_id = request.headers.get(settings.TRACE_ID_HEADER) or str(uuid.uuid4())
    return RequestContext(trace_id=trace_id, path=request.url.path)


class OutcomeResponder:
    """
    Callable handed to endpoints: `return respond(outcome)`.

    Accepts an `EndpointOutcome` or a bare `Outcome` (no transport hints)
    and returns the rendered response.
    """

    def __init__(self, mapper: OutcomeToHttpMapper, context: RequestContext):
        self.mapper = mapper
        self.context = context

    def __call__(self, outcome: Any) -> Response:
        if isinstance(outcome, Outcome):
            outcome = EndpointOutcome(outcome)
        return render_response(self.mapper.map(outcome, self.context))


def get_outcome_responder(
    mapper: OutcomeToHttpMapper = Depends(get_outcome_mapper),
    context: RequestContext = Depends(get_request_context),
) -> OutcomeResponder:
    return OutcomeResponder(mapper, context)
