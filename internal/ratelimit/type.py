from dataclasses import dataclass

from .constant import *


@dataclass
class Config:
    """Submission gate policy: at most max_requests per window_seconds."""

    max_requests: int = DEFAULT_MAX_REQUESTS
    window_seconds: int = DEFAULT_WINDOW_SECONDS

    def __post_init__(self):
        if self.max_requests <= 0:
            raise ValueError(ERROR_MAX_REQUESTS_POSITIVE)
        if self.window_seconds <= 0:
            raise ValueError(ERROR_WINDOW_POSITIVE)


__all__ = ["Config"]
