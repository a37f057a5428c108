"""Analytics queue handler.

Thin adapter: validates the decoded payload into an AnalyticsEvent and
hands it to the usecase. Acknowledgment is the worker's job.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from pkg.logger.logger import Logger
from internal.model import AnalyticsEvent

from ...errors import ErrInvalidEvent
from ...interface import IAnalyticsHandler, IAnalyticsUseCase


class AnalyticsHandler(IAnalyticsHandler):
    def __init__(self, usecase: IAnalyticsUseCase, logger: Optional[Logger] = None):
        self.usecase = usecase
        self.logger = logger

    async def handle(self, payload: Dict[str, Any]) -> None:
        try:
            event = AnalyticsEvent.model_validate(payload)
        except ValidationError as exc:
            raise ErrInvalidEvent(f"invalid analytics event: {exc}") from exc

        await self.usecase.process(event)

        if self.logger:
            self.logger.info(
                f"[AnalyticsHandler] Analytics event processed: {event.event.value}"
            )


__all__ = ["AnalyticsHandler"]
