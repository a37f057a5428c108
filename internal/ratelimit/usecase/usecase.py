from typing import Optional

from pkg.logger.logger import Logger
from pkg.redis import ICache, LIMIT_REACHED
from internal.model import cache_key

from ..constant import *
from ..errors import ErrRateLimited
from ..interface import ISubmissionGate
from ..type import Config


class SubmissionGate(ISubmissionGate):
    """Fixed-window submission limiter on top of the shared cache.

    The counter lives at ``rate:contact:<identity>``. Admission and the
    increment happen in one atomic cache call, so concurrent submissions
    from the same identity cannot both slip past the limit. A rejected
    attempt leaves the counter untouched. When the cache is unavailable
    every submission is admitted.
    """

    def __init__(self, config: Config, cache: ICache, logger: Optional[Logger] = None):
        self.config = config
        self.cache = cache
        self.logger = logger

    async def check(self, identity: str) -> int:
        if not identity:
            raise ValueError(ERROR_IDENTITY_EMPTY)

        key = cache_key.contact_rate(identity)
        count = await self.cache.incr_within_limit(
            key, self.config.max_requests, self.config.window_seconds
        )

        if count is None:
            if self.logger:
                self.logger.warning(
                    f"[SubmissionGate] Cache unavailable, admitting {identity} unchecked"
                )
            return 0

        if count == LIMIT_REACHED:
            if self.logger:
                self.logger.info(f"[SubmissionGate] Rate limited: identity={identity}")
            raise ErrRateLimited(
                identity, self.config.max_requests, self.config.window_seconds
            )

        if self.logger:
            self.logger.debug(
                f"[SubmissionGate] Admitted {identity}: {count}/{self.config.max_requests}"
            )
        return count

    async def remaining(self, identity: str) -> int:
        used = await self.cache.get(cache_key.contact_rate(identity))
        try:
            used = int(used or 0)
        except (TypeError, ValueError):
            used = 0
        return max(self.config.max_requests - used, 0)


__all__ = ["SubmissionGate"]
