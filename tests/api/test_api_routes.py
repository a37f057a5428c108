"""API route tests using FastAPI's TestClient and in-memory clients."""

import json

import pytest
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from config.config import Config
from internal.api import create_app
from internal.consumer import Dependencies
from internal.contact import (
    MSG_INVALID_EMAIL,
    MSG_MESSAGE_SENT,
    MSG_RATE_LIMITED,
    MSG_REQUIRED_FIELDS,
    MSG_SUBMISSION_FAILED,
    MSG_VALIDATION_ERROR,
)

from conftest import FakeCache, FakeQueue

VALID_FORM = {
    "name": "Jane Doe",
    "email": "jane@example.org",
    "subject": "Project inquiry",
    "message": "I would like to discuss a project.",
}


def build(cache=None, queue=None, logger=None, embedded=False):
    config = Config()
    config.workers.embedded = embedded
    deps = Dependencies(
        logger=logger,
        cache=cache or FakeCache(),
        queue=queue or FakeQueue(),
        mail_sender=AsyncMock(),
        config=config,
    )
    return deps, create_app(deps)


@pytest.fixture
def deps_and_client(mock_logger):
    deps, app = build(logger=mock_logger)
    return deps, TestClient(app)


class TestContactRoute:
    def test_success(self, deps_and_client):
        deps, client = deps_and_client

        response = client.post("/api/contact", json=VALID_FORM)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": MSG_MESSAGE_SENT}
        assert len(deps.queue.payloads("email_queue")) == 1
        assert "X-Request-ID" in response.headers

    def test_missing_field_400(self, deps_and_client):
        _, client = deps_and_client
        form = {k: v for k, v in VALID_FORM.items() if k != "message"}

        response = client.post("/api/contact", json=form)

        assert response.status_code == 400
        assert response.json() == {"error": MSG_REQUIRED_FIELDS}

    def test_invalid_email_400(self, deps_and_client):
        _, client = deps_and_client

        response = client.post("/api/contact", json={**VALID_FORM, "email": "jane"})

        assert response.status_code == 400
        assert response.json() == {"error": MSG_INVALID_EMAIL}

    def test_malformed_json_400(self, deps_and_client):
        _, client = deps_and_client

        response = client.post(
            "/api/contact", content=b"{oops", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": MSG_VALIDATION_ERROR}

    def test_rate_limited_429(self, deps_and_client):
        _, client = deps_and_client
        headers = {"X-Forwarded-For": "1.2.3.4, 10.0.0.1"}

        for _ in range(5):
            assert client.post("/api/contact", json=VALID_FORM, headers=headers).status_code == 200
        response = client.post("/api/contact", json=VALID_FORM, headers=headers)

        assert response.status_code == 429
        assert response.json() == {"error": MSG_RATE_LIMITED}

    def test_validation_failure_does_not_consume_budget(self, deps_and_client):
        deps, client = deps_and_client
        headers = {"X-Real-IP": "9.9.9.9"}

        client.post("/api/contact", json={**VALID_FORM, "email": "bad"}, headers=headers)

        assert deps.cache.store == {}

    def test_generic_failure_500(self, mock_logger):
        deps, app = build(logger=mock_logger)
        app.state.services.contact_usecase.publisher.publish_email = AsyncMock(
            side_effect=RuntimeError("boom")
        )

        response = TestClient(app).post("/api/contact", json=VALID_FORM)

        assert response.status_code == 500
        assert response.json() == {"error": MSG_SUBMISSION_FAILED}

    def test_broker_down_still_200(self, mock_logger):
        _, app = build(queue=FakeQueue(connected=False), logger=mock_logger)

        response = TestClient(app).post("/api/contact", json=VALID_FORM)

        assert response.status_code == 200


class TestIdentity:
    @pytest.mark.parametrize(
        "headers,expected",
        [
            ({"X-Forwarded-For": "1.2.3.4, 10.0.0.1", "X-Real-IP": "5.6.7.8"}, "1.2.3.4"),
            ({"X-Real-IP": "5.6.7.8"}, "5.6.7.8"),
            ({}, "testclient"),
        ],
    )
    def test_identity_order(self, deps_and_client, headers, expected):
        deps, client = deps_and_client

        client.post("/api/contact", json=VALID_FORM, headers=headers)

        assert f"rate:contact:{expected}" in deps.cache.store


class TestAnalyticsRoute:
    def test_track_counts_and_queues(self, deps_and_client):
        deps, client = deps_and_client

        for _ in range(2):
            response = client.post(
                "/api/analytics",
                json={"event": "contact_form_submit", "timestamp": "2024-01-01T00:00:00Z"},
            )
            assert response.status_code == 200
            assert response.json() == {"success": True}

        stored, _ = deps.cache.store["analytics:2024-01-01"]
        assert json.loads(stored) == {"contact_form_submit": 2}
        assert deps.queue.payloads("analytics_queue")[0]["ip"] == "testclient"

    def test_invalid_event_still_200(self, deps_and_client):
        _, client = deps_and_client

        response = client.post("/api/analytics", json={"event": "nope"})

        assert response.status_code == 200
        assert response.json() == {"success": False}

    def test_backends_down_still_200(self, mock_logger):
        _, app = build(
            cache=FakeCache(connected=False), queue=FakeQueue(connected=False), logger=mock_logger
        )

        response = TestClient(app).post("/api/analytics", json={"event": "page_view"})

        assert response.status_code == 200


class TestStatusRoute:
    def test_status_document(self, deps_and_client):
        _, client = deps_and_client

        body = client.get("/api/system-status").json()

        assert body["status"] == "healthy"
        assert body["redis"]["connected"] is True
        assert body["rabbitmq"]["connected"] is True

    def test_status_failure_500(self, mock_logger):
        deps, app = build(logger=mock_logger)
        app.state.services.status_usecase.get_status = AsyncMock(side_effect=RuntimeError("x"))

        response = TestClient(app).get("/api/system-status")

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["error"] == "System status check failed"
        assert "timestamp" in body


class TestHealthRoutes:
    def test_liveness(self, deps_and_client):
        _, client = deps_and_client
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready_with_cache_down(self, mock_logger):
        _, app = build(cache=FakeCache(connected=False), logger=mock_logger)

        response = TestClient(app).get("/health/ready")

        assert response.status_code == 200
        assert response.json()["dependencies"]["redis"] == "unavailable"

    def test_not_ready_without_broker(self, mock_logger):
        _, app = build(queue=FakeQueue(connected=False), logger=mock_logger)

        response = TestClient(app).get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_ready_after_broker_comes_up(self, mock_logger):
        queue = FakeQueue(connected=False)
        _, app = build(queue=queue, logger=mock_logger)
        client = TestClient(app)

        assert client.get("/health/ready").status_code == 503
        queue.reachable = True
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["dependencies"]["rabbitmq"] == "healthy"

    def test_embedded_workers_start_with_app(self, mock_logger):
        deps, app = build(logger=mock_logger, embedded=True)

        with TestClient(app) as client:
            assert set(deps.queue.consumers) == {"email_queue", "analytics_queue"}
            body = client.get("/health/ready").json()
            assert body["dependencies"]["workers"] == "ready"

        assert deps.queue.consumers == {}
