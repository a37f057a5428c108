"""Module-specific errors for contact domain.

Each error carries the message shown to the submitter.
"""

from internal.ratelimit import ErrRateLimited

from .constant import *


class ErrInvalidSubmission(Exception):
    """Raised when a submission fails validation."""

    def __init__(self, message: str = MSG_VALIDATION_ERROR):
        self.message = message
        super().__init__(message)


class ErrSubmissionFailed(Exception):
    """Raised when a submission could not be processed."""

    def __init__(self, message: str = MSG_SUBMISSION_FAILED):
        self.message = message
        super().__init__(message)


__all__ = ["ErrInvalidSubmission", "ErrSubmissionFailed", "ErrRateLimited"]
