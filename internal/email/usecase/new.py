"""Factory function for creating the email usecase."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.smtp import IMailSender

from .usecase import EmailUseCase


def New(sender: IMailSender, logger: Optional[Logger] = None) -> EmailUseCase:
    if sender is None:
        raise ValueError("mail sender is required")
    return EmailUseCase(sender=sender, logger=logger)


__all__ = ["New"]
