from typing import Protocol, runtime_checkable

from .type import MailMessage


@runtime_checkable
class IMailSender(Protocol):
    """Protocol for delivering a single email."""

    async def send(self, message: MailMessage) -> str:
        """Deliver a message and return its Message-ID.

        Raises:
            SMTPSendError: If the message could not be delivered
        """
        ...


__all__ = ["IMailSender"]
