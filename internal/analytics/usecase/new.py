"""Factory function for creating the analytics usecase."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.redis import ICache
from internal.job import IJobPublisher

from ..type import Config
from .usecase import AnalyticsUseCase


def New(
    config: Config,
    cache: ICache,
    publisher: IJobPublisher,
    logger: Optional[Logger] = None,
) -> AnalyticsUseCase:
    """Create a new analytics usecase.

    Args:
        config: Analytics configuration
        cache: Cache holding the daily summaries
        publisher: Job publisher for the analytics queue
        logger: Logger instance (optional)

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return AnalyticsUseCase(
        config=config, cache=cache, publisher=publisher, logger=logger
    )


__all__ = ["New"]
