"""Email queue handler."""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from pkg.logger.logger import Logger
from internal.model import EmailJob

from ...errors import ErrInvalidEmailJob
from ...interface import IEmailHandler, IEmailUseCase


class EmailHandler(IEmailHandler):
    """Validates a decoded email payload and sends it. NO business logic here."""

    def __init__(self, usecase: IEmailUseCase, logger: Optional[Logger] = None):
        self.usecase = usecase
        self.logger = logger

    async def handle(self, payload: Dict[str, Any]) -> None:
        try:
            job = EmailJob.model_validate(payload)
        except ValidationError as exc:
            raise ErrInvalidEmailJob(f"invalid email job: {exc}") from exc

        await self.usecase.send(job)


__all__ = ["EmailHandler"]
