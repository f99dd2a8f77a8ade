"""
Integration tests: outcomes returned from routes through the responder
dependency, rendered by FastAPI.
"""
from outcome_http.core.dependencies import get_outcome_mapper
from outcome_http.schemas.problem import ProblemDescription
from outcome_http.services.http_mapper import OutcomeToHttpMapper, TransportResponse


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


class TestSuccessOutcomes:
    def test_value_is_200_json(self, client):
        r = client.get("/items/1")
        assert r.status_code == 200
        assert r.json() == {"id": 1, "name": "widget"}

    def test_status_override(self, client):
        r = client.post("/items")
        assert r.status_code == 201
        assert r.json()["name"] == "gadget"

    def test_unit_is_204_without_body(self, client):
        r = client.delete("/items/1")
        assert r.status_code == 204
        assert r.content == b""


class TestFailureOutcomes:
    def test_not_found_problem(self, client):
        r = client.get("/items/99", headers={"X-Request-Id": "req-42"})
        assert r.status_code == 404
        assert r.headers["content-type"].startswith("application/problem+json")
        body = r.json()
        assert body["title"] == "Not Found"
        assert body["detail"] == "Item 99 does not exist."
        assert body["type"] == "about:blank"
        assert body["instance"] == "/items/99"
        assert body["ErrorCode"] == "ITEM_NOT_FOUND"
        assert body["TraceId"] == "req-42"

    def test_precomputed_problem(self, client):
        r = client.get("/items/special/teapot")
        assert r.status_code == 418
        body = r.json()
        assert body["title"] == "FromTransport"
        assert body["detail"] == "short and stout"
        assert "ErrorCode" not in body

    def test_empty_failure_is_500(self, client):
        r = client.get("/items/special/empty-failure")
        assert r.status_code == 500
        body = r.json()
        assert body["detail"] == "No error information was provided."
        assert "ErrorCode" not in body
        assert "TraceId" in body


class TestTraceId:
    def test_incoming_header_echoed(self, client):
        r = client.get("/items/1", headers={"X-Request-Id": "req-1"})
        assert r.headers["X-Request-Id"] == "req-1"

    def test_generated_when_missing(self, client):
        r = client.get("/items/99")
        generated = r.headers["X-Request-Id"]
        assert generated
        assert r.json()["TraceId"] == generated


class TestOverrides:
    def test_mapper_can_be_replaced(self, app, client):
        class FixedMapper(OutcomeToHttpMapper):
            def map(self, outcome, context):
                return TransportResponse(
                    503,
                    body=ProblemDescription(status=503, title="Maintenance"),
                    media_type="application/problem+json",
                )

        app.dependency_overrides[get_outcome_mapper] = lambda: FixedMapper()
        r = client.get("/items/1")
        assert r.status_code == 503
        assert r.json()["title"] == "Maintenance"
