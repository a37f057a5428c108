from typing import Dict, Optional

from pkg.logger.logger import Logger
from pkg.redis import ICache
from internal.job import IJobPublisher
from internal.model import AnalyticsEvent, cache_key

from ..interface import IAnalyticsUseCase
from ..type import Config


class AnalyticsUseCase(IAnalyticsUseCase):
    """Publishes analytics events and keeps the per-day event counters.

    The daily summary is a JSON mapping of event name to count stored at
    ``analytics:<YYYY-MM-DD>``. It is read, incremented and written back,
    so two concurrent updates can lose one increment.
    """

    def __init__(
        self,
        config: Config,
        cache: ICache,
        publisher: IJobPublisher,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.cache = cache
        self.publisher = publisher
        self.logger = logger

    async def track(self, event: AnalyticsEvent) -> bool:
        published = await self.publisher.publish_analytics(event)
        if not published and self.logger:
            self.logger.warning(
                f"[AnalyticsUseCase] Event {event.event.value} not queued, counting only"
            )

        await self.increment_summary(event)
        return published

    async def process(self, event: AnalyticsEvent) -> None:
        if self.logger:
            self.logger.info(
                f"[AnalyticsUseCase] Processing analytics event: {event.event.value}"
            )

        # Counted once already at enqueue time
        if self.config.count_on_consume:
            await self.increment_summary(event)

    async def increment_summary(self, event: AnalyticsEvent) -> Dict[str, int]:
        key = cache_key.analytics(event.event_date())
        summary = await self.get_summary_by_key(key)
        name = event.event.value
        summary[name] = summary.get(name, 0) + 1

        stored = await self.cache.set(key, summary, ttl=self.config.summary_ttl)
        if not stored and self.logger:
            self.logger.debug(f"[AnalyticsUseCase] Summary {key} not stored")
        return summary

    async def get_summary(self, date: str) -> Dict[str, int]:
        return await self.get_summary_by_key(cache_key.analytics(date))

    async def get_summary_by_key(self, key: str) -> Dict[str, int]:
        summary = await self.cache.get(key)
        if not isinstance(summary, dict):
            return {}
        return {str(k): int(v) for k, v in summary.items()}


__all__ = ["AnalyticsUseCase"]
