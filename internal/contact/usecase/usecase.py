from typing import Optional

from pkg.logger.logger import Logger
from internal.analytics import IAnalyticsUseCase
from internal.email import IEmailUseCase
from internal.job import IJobPublisher
from internal.model import AnalyticsEvent, AnalyticsEventName, EmailJob
from internal.ratelimit import ErrRateLimited, ISubmissionGate

from ..constant import *
from ..errors import ErrSubmissionFailed
from ..interface import IContactUseCase
from ..type import Config, ContactForm, SubmissionResult
from .helpers import build_email_job


class ContactUseCase(IContactUseCase):
    """Contact submission path.

    Flow: gate -> email job -> analytics event -> result.

    Only the gate can reject a validated submission. Queue and cache
    problems are logged and the submission still succeeds; when the email
    cannot be queued it is either dropped or, with sync_fallback, sent
    directly.
    """

    def __init__(
        self,
        config: Config,
        gate: ISubmissionGate,
        publisher: IJobPublisher,
        analytics: IAnalyticsUseCase,
        email: Optional[IEmailUseCase] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.gate = gate
        self.publisher = publisher
        self.analytics = analytics
        self.email = email
        self.logger = logger

    async def submit(self, form: ContactForm, identity: str) -> SubmissionResult:
        try:
            await self.gate.check(identity)

            job = build_email_job(form, self.config)
            queued = await self.publisher.publish_email(job)
            if not queued:
                await self._on_email_not_queued(job)

            await self.analytics.track(
                AnalyticsEvent(
                    event=AnalyticsEventName.CONTACT_FORM_SUBMIT,
                    metadata={"subject": form.subject, "hasMessage": len(form.message) > 0},
                    ip=identity,
                )
            )
        except ErrRateLimited:
            if self.logger:
                self.logger.warning(f"[ContactUseCase] Rate limit exceeded: identity={identity}")
            raise
        except Exception as exc:
            if self.logger:
                self.logger.error_with_context(exc, f"Contact form submission - identity: {identity}")
            raise ErrSubmissionFailed() from exc

        if self.logger:
            self.logger.info(
                f"[ContactUseCase] Submission accepted: identity={identity}, "
                f"subject={form.subject}, message_length={len(form.message)}"
            )
        return SubmissionResult(success=True, message=MSG_MESSAGE_SENT)

    async def _on_email_not_queued(self, job: EmailJob) -> None:
        if not self.config.sync_fallback or self.email is None:
            if self.logger:
                self.logger.warning("[ContactUseCase] Failed to queue email, email dropped")
            return

        if self.logger:
            self.logger.warning("[ContactUseCase] Failed to queue email, sending synchronously")
        try:
            await self.email.send(job)
        except Exception as exc:
            if self.logger:
                self.logger.error_with_context(exc, "Contact email synchronous fallback")


__all__ = ["ContactUseCase"]
