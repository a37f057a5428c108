"""Rate Limit Domain.

Admits contact submissions per identity within a fixed window.
"""

from .constant import *
from .errors import ErrRateLimited
from .interface import ISubmissionGate
from .type import Config
from .usecase import New as NewSubmissionGate, SubmissionGate

__all__ = [
    "ISubmissionGate",
    "SubmissionGate",
    "Config",
    "ErrRateLimited",
    "NewSubmissionGate",
    "DEFAULT_MAX_REQUESTS",
    "DEFAULT_WINDOW_SECONDS",
]
