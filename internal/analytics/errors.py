"""Module-specific errors for analytics domain."""


class ErrInvalidEvent(Exception):
    """Raised when an analytics payload does not describe a known event."""

    pass


__all__ = ["ErrInvalidEvent"]
