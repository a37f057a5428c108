"""Module-specific errors for email domain."""


class ErrInvalidEmailJob(Exception):
    """Raised when an email payload is missing fields or malformed."""

    pass


__all__ = ["ErrInvalidEmailJob"]
