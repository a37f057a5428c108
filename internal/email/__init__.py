"""Email Domain.

Delivers email jobs taken off the email queue.
"""

from .interface import IEmailHandler, IEmailUseCase
from .errors import ErrInvalidEmailJob
from .usecase import New as NewEmailUseCase, EmailUseCase
from .delivery.rabbitmq import EmailHandler

__all__ = [
    "IEmailUseCase",
    "IEmailHandler",
    "EmailUseCase",
    "EmailHandler",
    "ErrInvalidEmailJob",
    "NewEmailUseCase",
]
