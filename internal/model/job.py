"""Job payloads carried on the work queues.

Wire keys are camelCase (``from``, ``replyTo``, ``userAgent``) so the
queues stay readable by any producer or consumer of the same format.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class AnalyticsEventName(str, Enum):
    PAGE_VIEW = "page_view"
    CONTACT_FORM_SUBMIT = "contact_form_submit"
    PROJECT_VIEW = "project_view"
    CODE_RUN = "code_run"


def utc_now_iso() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EmailJob(BaseModel):
    """A request to deliver one email."""

    model_config = ConfigDict(populate_by_name=True)

    to: str = Field(pattern=EMAIL_PATTERN)
    subject: str = Field(min_length=1)
    html: str = Field(min_length=1)
    text: Optional[str] = None
    from_address: Optional[str] = Field(default=None, alias="from", pattern=EMAIL_PATTERN)
    reply_to: Optional[str] = Field(default=None, alias="replyTo", pattern=EMAIL_PATTERN)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class AnalyticsEvent(BaseModel):
    """One analytics occurrence (page view, form submit, ...)."""

    model_config = ConfigDict(populate_by_name=True)

    event: AnalyticsEventName
    page: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    timestamp: str = Field(default_factory=utc_now_iso, min_length=1)
    user_agent: Optional[str] = Field(default=None, alias="userAgent")
    ip: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def event_date(self) -> str:
        """UTC calendar date (YYYY-MM-DD) of the event.

        Falls back to today when the timestamp does not parse.
        """
        try:
            parsed = datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
        except ValueError:
            parsed = datetime.now(timezone.utc)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc).date().isoformat()


__all__ = [
    "EMAIL_PATTERN",
    "AnalyticsEventName",
    "EmailJob",
    "AnalyticsEvent",
    "utc_now_iso",
]
