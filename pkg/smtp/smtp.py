import uuid
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate

import aiosmtplib
from loguru import logger

from .constant import *
from .interface import IMailSender
from .type import MailMessage, SMTPConfig


class SMTPSendError(Exception):
    """Raised when a message could not be handed to the SMTP relay."""

    pass


def build_mime(message: MailMessage, config: SMTPConfig) -> MIMEMultipart:
    """Build a multipart/alternative message with text and html parts."""
    domain = config.from_address.rsplit("@", 1)[-1]
    msg = MIMEMultipart(MIME_ALTERNATIVE)
    msg["Subject"] = message.subject
    msg["From"] = formataddr((config.from_name, message.from_address or config.from_address))
    msg["To"] = message.to
    msg["Date"] = formatdate(localtime=True)
    msg["Message-ID"] = f"<{uuid.uuid4()}@{domain}>"
    if message.reply_to:
        msg["Reply-To"] = message.reply_to

    if message.text:
        msg.attach(MIMEText(message.text, "plain", CHARSET))
    if message.html:
        msg.attach(MIMEText(message.html, "html", CHARSET))
    return msg


class SMTPSender(IMailSender):
    """Sends mail through an SMTP relay with aiosmtplib.

    Port 465 uses implicit TLS; any other port upgrades with STARTTLS
    when the server offers it.
    """

    def __init__(self, config: SMTPConfig):
        self.config = config

    async def send(self, message: MailMessage) -> str:
        msg = build_mime(message, self.config)
        try:
            await aiosmtplib.send(
                msg,
                hostname=self.config.host,
                port=self.config.port,
                username=self.config.username or None,
                password=self.config.password or None,
                use_tls=self.config.use_tls,
                timeout=self.config.timeout,
                validate_certs=self.config.validate_certs,
            )
        except aiosmtplib.SMTPException as e:
            raise SMTPSendError(f"SMTP delivery to {message.to} failed: {e}") from e
        except OSError as e:
            raise SMTPSendError(f"SMTP relay {self.config.host} unreachable: {e}") from e

        logger.info(f"Email sent to {message.to}: {message.subject}")
        return msg["Message-ID"]


class LogSender(IMailSender):
    """Stands in for a relay when none is configured: logs and drops."""

    def __init__(self, config: SMTPConfig):
        self.config = config

    async def send(self, message: MailMessage) -> str:
        msg = build_mime(message, self.config)
        logger.info(
            f"SMTP not configured, email logged instead of sent: to={message.to}, "
            f"subject={message.subject}, reply_to={message.reply_to}"
        )
        return msg["Message-ID"]


def new_sender(config: SMTPConfig) -> IMailSender:
    """Pick the SMTP sender when a relay is configured, else the log sender."""
    if config.enabled:
        return SMTPSender(config)
    logger.warning("SMTP host not configured, emails will be logged only")
    return LogSender(config)


__all__ = ["SMTPSender", "LogSender", "SMTPSendError", "build_mime", "new_sender"]
