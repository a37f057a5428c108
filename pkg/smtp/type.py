from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class SMTPConfig:
    """SMTP relay configuration. An empty host disables real delivery."""

    host: str = ""
    port: int = DEFAULT_PORT
    username: Optional[str] = None
    password: Optional[str] = None
    from_address: str = DEFAULT_FROM_ADDRESS
    from_name: str = DEFAULT_FROM_NAME
    timeout: int = DEFAULT_TIMEOUT
    validate_certs: bool = True

    def __post_init__(self):
        if self.port <= 0 or self.port > 65535:
            raise ValueError(ERROR_INVALID_PORT)
        if self.timeout <= 0:
            raise ValueError(ERROR_TIMEOUT_POSITIVE)

    @property
    def enabled(self) -> bool:
        return bool(self.host and self.host.strip())

    @property
    def use_tls(self) -> bool:
        return self.port == IMPLICIT_TLS_PORT


@dataclass
class MailMessage:
    to: str
    subject: str
    html: str = ""
    text: Optional[str] = None
    from_address: Optional[str] = None
    reply_to: Optional[str] = None

    def __post_init__(self):
        if not self.to:
            raise ValueError(ERROR_RECIPIENT_EMPTY)
        if not self.html and not self.text:
            raise ValueError(ERROR_NO_BODY)


__all__ = ["SMTPConfig", "MailMessage"]
