"""Factory function for creating the status usecase."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.rabbitmq import IQueueClient
from pkg.redis import ICache

from .usecase import StatusUseCase


def New(cache: ICache, queue: IQueueClient, logger: Optional[Logger] = None) -> StatusUseCase:
    return StatusUseCase(cache=cache, queue=queue, logger=logger)


__all__ = ["New"]
