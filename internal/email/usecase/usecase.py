from typing import Optional

from pkg.logger.logger import Logger
from pkg.smtp import IMailSender, MailMessage
from internal.model import EmailJob

from ..interface import IEmailUseCase


class EmailUseCase(IEmailUseCase):
    """Sends email jobs through the configured mail sender."""

    def __init__(self, sender: IMailSender, logger: Optional[Logger] = None):
        self.sender = sender
        self.logger = logger

    async def send(self, job: EmailJob) -> str:
        message = MailMessage(
            to=job.to,
            subject=job.subject,
            html=job.html,
            text=job.text,
            from_address=job.from_address,
            reply_to=job.reply_to,
        )

        if self.logger:
            self.logger.info(f"[EmailUseCase] Processing email job: {job.subject}")

        message_id = await self.sender.send(message)

        if self.logger:
            self.logger.info(f"[EmailUseCase] Email sent to {job.to}: {message_id}")
        return message_id


__all__ = ["EmailUseCase"]
