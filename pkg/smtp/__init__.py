from .type import MailMessage, SMTPConfig
from .interface import IMailSender
from .smtp import LogSender, SMTPSendError, SMTPSender, build_mime, new_sender

__all__ = [
    "IMailSender",
    "SMTPSender",
    "LogSender",
    "SMTPSendError",
    "SMTPConfig",
    "MailMessage",
    "build_mime",
    "new_sender",
]
