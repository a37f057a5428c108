from . import cache_key
from .constant import *
from .job import (
    EMAIL_PATTERN,
    AnalyticsEvent,
    AnalyticsEventName,
    EmailJob,
    utc_now_iso,
)
from .queue import QueueName, build_declarations

__all__ = [
    "cache_key",
    # Jobs
    "EmailJob",
    "AnalyticsEvent",
    "AnalyticsEventName",
    "EMAIL_PATTERN",
    "utc_now_iso",
    # Queues
    "QueueName",
    "build_declarations",
    # Constants
    "LOGGER_SERVICE_NAME",
    "ANONYMOUS_IDENTITY",
]
