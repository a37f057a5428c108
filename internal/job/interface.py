from typing import Any, Dict, Protocol, runtime_checkable

from internal.model import AnalyticsEvent, EmailJob


@runtime_checkable
class IJobPublisher(Protocol):
    """Protocol for enqueueing jobs onto their fixed work queues.

    Every method returns True when the broker accepted the job and False
    otherwise; none of them raise on broker failure.
    """

    async def publish_email(self, job: EmailJob) -> bool:
        ...

    async def publish_analytics(self, event: AnalyticsEvent) -> bool:
        ...

    async def publish_notification(self, payload: Dict[str, Any]) -> bool:
        ...


__all__ = ["IJobPublisher"]
