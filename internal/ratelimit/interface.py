from typing import Protocol, runtime_checkable


@runtime_checkable
class ISubmissionGate(Protocol):
    """Protocol for admitting or rejecting submissions per identity."""

    async def check(self, identity: str) -> int:
        """Admit one submission and return the count used in the window.

        Raises:
            ErrRateLimited: If the identity already used its budget
        """
        ...

    async def remaining(self, identity: str) -> int:
        """Submissions left in the current window."""
        ...


__all__ = ["ISubmissionGate"]
