import asyncio
import time
from typing import Any, Dict, Optional

import psutil

from pkg.logger.logger import Logger
from pkg.rabbitmq import IQueueClient
from pkg.redis import ICache
from internal.model import utc_now_iso

from ..constant import *
from ..interface import IStatusUseCase


def to_mb(value: int) -> int:
    return round(value / BYTES_PER_MB)


class StatusUseCase(IStatusUseCase):
    """Builds the system status document from process, cache and broker figures.

    Memory values are in MB, uptime in seconds and responseTime in ms.
    `memory.used` is this process's resident set size, `memory.total` is
    the host's physical RAM and `memory.percentage` is used over total.
    `uptime` is the age of this process, not of the host.
    """

    def __init__(self, cache: ICache, queue: IQueueClient, logger: Optional[Logger] = None):
        self.cache = cache
        self.queue = queue
        self.logger = logger
        self.process = psutil.Process()

    async def get_status(self) -> Dict[str, Any]:
        start_time = time.perf_counter()

        # Lets either backend recover from a failed connect
        await asyncio.gather(self.cache.health_check(), self.queue.ensure_connected())
        cache_stats, queue_stats = await asyncio.gather(
            self.cache.get_stats(), self.queue.get_queue_stats()
        )

        used = self.process.memory_info().rss
        total = psutil.virtual_memory().total

        status = {
            "timestamp": utc_now_iso(),
            "uptime": int(time.time() - self.process.create_time()),
            "memory": {
                "used": to_mb(used),
                "total": to_mb(total),
                "percentage": round(used / total * 100) if total else 0,
            },
            "redis": {
                "connected": cache_stats.connected,
                "hits": cache_stats.hits,
                "misses": cache_stats.misses,
                "keys": cache_stats.keys,
                "memory": to_mb(cache_stats.memory),
            },
            "rabbitmq": queue_stats.to_dict(),
            "responseTime": int((time.perf_counter() - start_time) * 1000),
            "status": STATUS_HEALTHY,
        }

        if self.logger:
            self.logger.debug(
                f"[StatusUseCase] redis={cache_stats.connected}, "
                f"rabbitmq={queue_stats.connected}, response_ms={status['responseTime']}"
            )
        return status


__all__ = ["StatusUseCase", "to_mb"]
