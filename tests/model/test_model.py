"""Tests for cache keys, queue declarations and job payloads."""

import pytest
from pydantic import ValidationError

from internal.model import (
    AnalyticsEvent,
    AnalyticsEventName,
    EmailJob,
    QueueName,
    build_declarations,
    cache_key,
)


class TestCacheKeys:
    def test_key_namespace(self):
        assert cache_key.contact_rate("1.2.3.4") == "rate:contact:1.2.3.4"
        assert cache_key.analytics("2024-01-01") == "analytics:2024-01-01"
        assert cache_key.github_user("alexchen") == "github:user:alexchen"
        assert cache_key.github_repos("alexchen") == "github:repos:alexchen"
        assert cache_key.system_status() == "system:status"


class TestQueueDeclarations:
    def test_every_queue_declared(self):
        names = [d.name for d in build_declarations()]
        assert names == ["email_queue", "analytics_queue", "notifications_queue"]

    def test_dead_letter_toggle(self):
        with_dlx = build_declarations(dead_letter_enabled=True)[0].arguments()
        without_dlx = build_declarations(dead_letter_enabled=False)[0].arguments()

        assert with_dlx["x-dead-letter-exchange"] == "dlx"
        assert with_dlx["x-dead-letter-routing-key"] == "failed"
        assert "x-dead-letter-exchange" not in without_dlx

    def test_queue_name_is_closed_set(self):
        with pytest.raises(ValueError):
            QueueName("emails")


class TestEmailJob:
    def test_wire_keys_are_camel_case(self):
        job = EmailJob(
            to="alex@example.com",
            subject="Portfolio Contact: Hi",
            html="<p>Hi</p>",
            reply_to="jane@example.org",
        )

        payload = job.to_payload()

        assert payload["replyTo"] == "jane@example.org"
        assert "from" not in payload
        assert "text" not in payload

    def test_parses_wire_payload(self):
        job = EmailJob.model_validate(
            {"to": "alex@example.com", "subject": "s", "html": "<p/>", "from": "site@example.com"}
        )
        assert job.from_address == "site@example.com"

    def test_invalid_recipient_rejected(self):
        with pytest.raises(ValidationError):
            EmailJob(to="not-an-email", subject="s", html="<p/>")


class TestAnalyticsEvent:
    def test_unknown_event_rejected(self):
        with pytest.raises(ValidationError):
            AnalyticsEvent.model_validate({"event": "button_click"})

    def test_default_timestamp_is_utc(self):
        event = AnalyticsEvent(event=AnalyticsEventName.PAGE_VIEW)
        assert event.timestamp.endswith("Z")

    def test_event_date_uses_utc(self):
        event = AnalyticsEvent(
            event=AnalyticsEventName.PAGE_VIEW, timestamp="2024-01-01T23:30:00-02:00"
        )
        assert event.event_date() == "2024-01-02"

    def test_event_date_from_z_timestamp(self):
        event = AnalyticsEvent(
            event=AnalyticsEventName.CONTACT_FORM_SUBMIT, timestamp="2024-01-01T00:00:00Z"
        )
        assert event.event_date() == "2024-01-01"

    def test_payload_round_trips_aliases(self):
        event = AnalyticsEvent.model_validate(
            {"event": "code_run", "userAgent": "Mozilla/5.0", "timestamp": "2024-01-01T00:00:00Z"}
        )
        payload = event.to_payload()

        assert payload["event"] == "code_run"
        assert payload["userAgent"] == "Mozilla/5.0"
