"""Factory function for creating the contact usecase."""

from typing import Optional

from pkg.logger.logger import Logger
from internal.analytics import IAnalyticsUseCase
from internal.email import IEmailUseCase
from internal.job import IJobPublisher
from internal.ratelimit import ISubmissionGate

from ..type import Config
from .usecase import ContactUseCase


def New(
    config: Config,
    gate: ISubmissionGate,
    publisher: IJobPublisher,
    analytics: IAnalyticsUseCase,
    email: Optional[IEmailUseCase] = None,
    logger: Optional[Logger] = None,
) -> ContactUseCase:
    """Create a new contact usecase.

    Args:
        config: Contact configuration
        gate: Submission gate
        publisher: Job publisher for the email queue
        analytics: Analytics usecase recording the submission event
        email: Email usecase used by the synchronous fallback (optional)
        logger: Logger instance (optional)

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return ContactUseCase(
        config=config,
        gate=gate,
        publisher=publisher,
        analytics=analytics,
        email=email,
        logger=logger,
    )


__all__ = ["New"]
