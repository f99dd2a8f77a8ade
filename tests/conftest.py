"""
Shared pytest fixtures.

Builds an app with a handful of demo routes that return outcomes through
the responder dependency, so the whole path (middleware, mapping,
rendering, exception handlers) runs under TestClient.
"""
import pytest
from fastapi import APIRouter, Depends
from fastapi.testclient import TestClient

from outcome_http.core.dependencies import OutcomeResponder, get_outcome_responder
from outcome_http.main import create_app
from outcome_http.schemas.outcome import EndpointOutcome, ErrorCategory, ErrorInfo, Outcome
from outcome_http.schemas.problem import ProblemDescription, RequestContext

TRACE_ID = "trace-123"

_ITEMS = {1: {"id": 1, "name": "widget"}}


demo = APIRouter(prefix="/items", tags=["demo"])


@demo.get("/{item_id}")
def get_item(item_id: int, respond: OutcomeResponder = Depends(get_outcome_responder)):
    item = _ITEMS.get(item_id)
    if item is None:
        return respond(Outcome.failure(ErrorInfo(
            category=ErrorCategory.not_found,
            code="ITEM_NOT_FOUND",
            message=f"Item {item_id} does not exist.",
        )))
    return respond(Outcome.success(item))


@demo.post("")
def create_item(respond: OutcomeResponder = Depends(get_outcome_responder)):
    return respond(EndpointOutcome.of(Outcome.success({"id": 2, "name": "gadget"}), status=201))


@demo.delete("/{item_id}")
def delete_item(item_id: int, respond: OutcomeResponder = Depends(get_outcome_responder)):
    return respond(Outcome.success())


@demo.get("/special/teapot")
def teapot(respond: OutcomeResponder = Depends(get_outcome_responder)):
    problem = ProblemDescription(status=418, title="FromTransport", detail="short and stout")
    return respond(EndpointOutcome.of(
        Outcome.failure(ErrorInfo(category=ErrorCategory.general, code="IGNORED")),
        problem=problem,
    ))


@demo.get("/special/empty-failure")
def empty_failure(respond: OutcomeResponder = Depends(get_outcome_responder)):
    return respond(Outcome.failure())


@demo.get("/special/boom")
def boom():
    raise RuntimeError("database password is hunter2")


@pytest.fixture()
def context():
    return RequestContext(trace_id=TRACE_ID, path="/api/resource")


@pytest.fixture()
def app():
    application = create_app()
    application.include_router(demo)
    return application


@pytest.fixture()
def client(app):
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
