"""Contact Domain.

Handles contact form submissions from validation to queued email.
"""

from .constant import *
from .interface import IContactUseCase
from .type import Config, ContactForm, SubmissionResult
from .errors import ErrInvalidSubmission, ErrRateLimited, ErrSubmissionFailed
from .usecase import (
    New as NewContactUseCase,
    ContactUseCase,
    build_email_job,
    parse_contact_form,
)

__all__ = [
    "IContactUseCase",
    "ContactUseCase",
    "Config",
    "ContactForm",
    "SubmissionResult",
    "ErrInvalidSubmission",
    "ErrRateLimited",
    "ErrSubmissionFailed",
    "NewContactUseCase",
    "build_email_job",
    "parse_contact_form",
    "MSG_MESSAGE_SENT",
    "MSG_RATE_LIMITED",
    "MSG_SUBMISSION_FAILED",
    "MSG_VALIDATION_ERROR",
    "MSG_REQUIRED_FIELDS",
    "MSG_INVALID_EMAIL",
]
