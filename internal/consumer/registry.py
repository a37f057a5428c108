from dataclasses import dataclass
from typing import Optional

from internal.consumer.type import Dependencies
from internal.job import NewJobPublisher, IJobPublisher
from internal.ratelimit import (
    NewSubmissionGate,
    ISubmissionGate,
    Config as RateLimitConfig,
)
from internal.analytics import (
    NewAnalyticsUseCase,
    AnalyticsHandler,
    IAnalyticsUseCase,
    Config as AnalyticsConfig,
)
from internal.email import NewEmailUseCase, EmailHandler, IEmailUseCase
from internal.contact import (
    NewContactUseCase,
    IContactUseCase,
    Config as ContactConfig,
)
from internal.status import NewStatusUseCase, IStatusUseCase


@dataclass
class DomainServices:
    publisher: IJobPublisher
    gate: ISubmissionGate
    analytics_usecase: IAnalyticsUseCase
    email_usecase: IEmailUseCase
    contact_usecase: IContactUseCase
    status_usecase: IStatusUseCase
    email_handler: EmailHandler
    analytics_handler: AnalyticsHandler


class ConsumerRegistry:
    """Wires the domain usecases and handlers from the shared dependencies."""

    def __init__(self, deps: Dependencies):
        self.deps = deps
        self.logger = deps.logger
        self.config = deps.config
        self._services: Optional[DomainServices] = None

    def initialize(self) -> DomainServices:
        if self._services is not None:
            self.logger.debug("Returning cached services")
            return self._services

        publisher = NewJobPublisher(queue=self.deps.queue, logger=self.logger)

        gate = NewSubmissionGate(
            config=RateLimitConfig(
                max_requests=self.config.contact.rate_limit_max,
                window_seconds=self.config.contact.rate_limit_window,
            ),
            cache=self.deps.cache,
            logger=self.logger,
        )

        analytics_usecase = NewAnalyticsUseCase(
            config=AnalyticsConfig(
                summary_ttl=self.config.analytics.summary_ttl,
                count_on_consume=self.config.analytics.count_on_consume,
            ),
            cache=self.deps.cache,
            publisher=publisher,
            logger=self.logger,
        )

        email_usecase = NewEmailUseCase(sender=self.deps.mail_sender, logger=self.logger)

        contact_usecase = NewContactUseCase(
            config=ContactConfig(
                recipient=self.config.contact.recipient,
                subject_prefix=self.config.contact.subject_prefix,
                sync_fallback=self.config.contact.sync_fallback,
            ),
            gate=gate,
            publisher=publisher,
            analytics=analytics_usecase,
            email=email_usecase,
            logger=self.logger,
        )

        status_usecase = NewStatusUseCase(
            cache=self.deps.cache, queue=self.deps.queue, logger=self.logger
        )

        self._services = DomainServices(
            publisher=publisher,
            gate=gate,
            analytics_usecase=analytics_usecase,
            email_usecase=email_usecase,
            contact_usecase=contact_usecase,
            status_usecase=status_usecase,
            email_handler=EmailHandler(usecase=email_usecase, logger=self.logger),
            analytics_handler=AnalyticsHandler(usecase=analytics_usecase, logger=self.logger),
        )
        self.logger.info("Domain services initialized")
        return self._services

    def get_services(self) -> DomainServices:
        if self._services is None:
            raise RuntimeError(
                "Domain services not initialized. Call initialize() first."
            )
        return self._services


__all__ = ["ConsumerRegistry", "DomainServices"]
