from typing import Any, Dict, Optional

from pkg.logger.logger import Logger
from pkg.rabbitmq import IQueueClient
from internal.model import AnalyticsEvent, EmailJob, QueueName

from ..interface import IJobPublisher


class JobPublisher(IJobPublisher):
    """Routes each job kind to its queue on the shared queue client."""

    def __init__(self, queue: IQueueClient, logger: Optional[Logger] = None):
        self.queue = queue
        self.logger = logger

    async def _publish(self, queue: QueueName, payload: Dict[str, Any]) -> bool:
        ok = await self.queue.publish(queue.value, payload)
        if not ok and self.logger:
            self.logger.warning(f"[JobPublisher] Job not enqueued on {queue.value}")
        return ok

    async def publish_email(self, job: EmailJob) -> bool:
        return await self._publish(QueueName.EMAIL, job.to_payload())

    async def publish_analytics(self, event: AnalyticsEvent) -> bool:
        return await self._publish(QueueName.ANALYTICS, event.to_payload())

    async def publish_notification(self, payload: Dict[str, Any]) -> bool:
        return await self._publish(QueueName.NOTIFICATIONS, payload)


__all__ = ["JobPublisher"]
