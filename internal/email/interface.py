from typing import Any, Dict, Protocol, runtime_checkable

from internal.model import EmailJob


@runtime_checkable
class IEmailUseCase(Protocol):
    """Protocol for delivering email jobs."""

    async def send(self, job: EmailJob) -> str:
        """Deliver the job and return the Message-ID.

        Raises:
            SMTPSendError: If delivery failed
        """
        ...


@runtime_checkable
class IEmailHandler(Protocol):
    """Protocol for the email queue handler."""

    async def handle(self, payload: Dict[str, Any]) -> None:
        ...


__all__ = ["IEmailUseCase", "IEmailHandler"]
