"""Factory function for creating the job publisher."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.rabbitmq import IQueueClient

from .usecase import JobPublisher


def New(queue: IQueueClient, logger: Optional[Logger] = None) -> JobPublisher:
    if queue is None:
        raise ValueError("queue client is required")
    return JobPublisher(queue=queue, logger=logger)


__all__ = ["New"]
