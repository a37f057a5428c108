"""Analytics Domain.

Tracks site events: enqueues them for the analytics worker and keeps a
per-day count of each event name in the cache.
"""

from .constant import *
from .interface import IAnalyticsHandler, IAnalyticsUseCase
from .type import Config
from .errors import ErrInvalidEvent

from .usecase import New as NewAnalyticsUseCase, AnalyticsUseCase
from .delivery.rabbitmq import AnalyticsHandler

__all__ = [
    # Interface
    "IAnalyticsUseCase",
    "IAnalyticsHandler",
    # Types
    "Config",
    "AnalyticsUseCase",
    # Errors
    "ErrInvalidEvent",
    # Factory functions
    "NewAnalyticsUseCase",
    "AnalyticsHandler",
    # Constants
    "DEFAULT_SUMMARY_TTL",
]
