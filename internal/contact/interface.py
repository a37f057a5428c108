from typing import Protocol, runtime_checkable

from .type import ContactForm, SubmissionResult


@runtime_checkable
class IContactUseCase(Protocol):
    """Protocol for the contact submission path."""

    async def submit(self, form: ContactForm, identity: str) -> SubmissionResult:
        """Admit, enqueue and record a validated submission.

        Raises:
            ErrRateLimited: If the identity used up its submission budget
            ErrSubmissionFailed: If the submission could not be processed
        """
        ...


__all__ = ["IContactUseCase"]
