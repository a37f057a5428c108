"""Module-specific errors for the rate limit domain."""


class ErrRateLimited(Exception):
    """Raised when an identity has used up its submission budget."""

    def __init__(self, identity: str, limit: int, window_seconds: int):
        self.identity = identity
        self.limit = limit
        self.window_seconds = window_seconds
        super().__init__(
            f"rate limit reached for {identity}: {limit} per {window_seconds}s"
        )


__all__ = ["ErrRateLimited"]
