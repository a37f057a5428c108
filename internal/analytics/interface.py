from typing import Any, Dict, Protocol, runtime_checkable

from internal.model import AnalyticsEvent


@runtime_checkable
class IAnalyticsUseCase(Protocol):
    """Protocol for analytics tracking."""

    async def track(self, event: AnalyticsEvent) -> bool:
        """Enqueue an event and count it in the daily summary.

        Returns:
            True if the event was enqueued
        """
        ...

    async def process(self, event: AnalyticsEvent) -> None:
        """Handle an event taken off the analytics queue."""
        ...

    async def increment_summary(self, event: AnalyticsEvent) -> Dict[str, int]:
        """Add one to the event's count for its day and return the mapping."""
        ...

    async def get_summary(self, date: str) -> Dict[str, int]:
        """Counts per event name for a YYYY-MM-DD date."""
        ...


@runtime_checkable
class IAnalyticsHandler(Protocol):
    """Protocol for the analytics queue handler."""

    async def handle(self, payload: Dict[str, Any]) -> None:
        ...


__all__ = ["IAnalyticsUseCase", "IAnalyticsHandler"]
