from dataclasses import dataclass, asdict

from pydantic import BaseModel, Field

from internal.model import EMAIL_PATTERN

from .constant import *


@dataclass
class Config:
    """Contact submission configuration.

    Attributes:
        recipient: Address every contact email is delivered to
        subject_prefix: Tag put in front of the submitted subject
        sync_fallback: Send the email directly when it cannot be queued
    """

    recipient: str = DEFAULT_RECIPIENT
    subject_prefix: str = DEFAULT_SUBJECT_PREFIX
    sync_fallback: bool = DEFAULT_SYNC_FALLBACK

    def __post_init__(self):
        if not self.recipient:
            raise ValueError("recipient cannot be empty")


class ContactForm(BaseModel):
    """A contact form submission."""

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH, pattern=NAME_PATTERN)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)
    subject: str = Field(min_length=SUBJECT_MIN_LENGTH, max_length=SUBJECT_MAX_LENGTH)
    message: str = Field(min_length=MESSAGE_MIN_LENGTH, max_length=MESSAGE_MAX_LENGTH)


@dataclass
class SubmissionResult:
    success: bool
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = ["Config", "ContactForm", "SubmissionResult"]
