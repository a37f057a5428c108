from dataclasses import dataclass

from .constant import *


@dataclass
class Config:
    """Analytics configuration.

    Attributes:
        summary_ttl: Lifetime of a daily summary entry in seconds
        count_on_consume: Whether the analytics worker increments the daily
            summary again when it processes a queued event
    """

    summary_ttl: int = DEFAULT_SUMMARY_TTL
    count_on_consume: bool = DEFAULT_COUNT_ON_CONSUME

    def __post_init__(self):
        if self.summary_ttl <= 0:
            raise ValueError(ERROR_SUMMARY_TTL_POSITIVE)


__all__ = ["Config"]
