"""Shared fixtures: in-memory cache and queue doubles, logger mock."""

import json
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest

from pkg.logger.logger import Logger
from pkg.rabbitmq import QueueInfo, QueueStats
from pkg.redis import CacheStats, LIMIT_REACHED


class FakeCache:
    """In-memory ICache with a manual clock for TTL expiry."""

    def __init__(self, connected: bool = True):
        self.connected = connected
        self.now = 0.0
        self.store: Dict[str, Tuple[str, float]] = {}
        self.ttls: Dict[str, int] = {}
        self.hits = 0
        self.misses = 0
        self.operations = 0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def _raw(self, key: str) -> Optional[str]:
        entry = self.store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self.now:
            del self.store[key]
            return None
        return value

    def _write(self, key: str, value: Any, ttl: int) -> None:
        self.store[key] = (json.dumps(value), self.now + ttl)
        self.ttls[key] = ttl

    async def connect(self) -> None:
        pass

    async def get(self, key: str) -> Optional[Any]:
        if not self.connected:
            self.misses += 1
            return None
        self.operations += 1
        raw = self._raw(key)
        if raw is None:
            self.misses += 1
            return None
        self.hits += 1
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: int = 3600) -> bool:
        if not self.connected:
            return False
        self.operations += 1
        self._write(key, value, ttl)
        return True

    async def delete(self, key: str) -> bool:
        if not self.connected:
            return False
        return self.store.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        if not self.connected:
            return False
        return self._raw(key) is not None

    async def incr_within_limit(self, key: str, limit: int, ttl: int) -> Optional[int]:
        if not self.connected:
            return None
        self.operations += 1
        raw = self._raw(key)
        current = int(json.loads(raw)) if raw is not None else 0
        if current >= limit:
            return LIMIT_REACHED
        self._write(key, current + 1, ttl)
        return current + 1

    async def get_stats(self) -> CacheStats:
        stats = CacheStats(
            connected=self.connected,
            hits=self.hits,
            misses=self.misses,
            operations=self.operations,
        )
        if self.connected:
            stats.keys = len(self.store)
            stats.memory = 2 * 1024 * 1024
        return stats

    async def flush(self) -> bool:
        if not self.connected:
            return False
        self.store.clear()
        return True

    def is_connected(self) -> bool:
        return self.connected

    async def health_check(self) -> bool:
        return self.connected

    async def disconnect(self) -> None:
        self.connected = False


class FakeQueue:
    """In-memory IQueueClient recording every accepted publish."""

    def __init__(self, connected: bool = True, accept: bool = True):
        self.connected = connected
        self.reachable = False
        self.reconnect_attempts = 0
        self.accept = accept
        self.published: List[Tuple[str, Any]] = []
        self.consumers: Dict[str, Any] = {}
        self.queue_names = ["email_queue", "analytics_queue", "notifications_queue"]

    async def connect(self) -> None:
        pass

    async def publish(self, queue: str, payload: Any) -> bool:
        if not self.connected or not self.accept:
            return False
        self.published.append((queue, payload))
        return True

    def payloads(self, queue: str) -> List[Any]:
        return [p for q, p in self.published if q == queue]

    async def consume(self, queue: str, handler) -> str:
        if not self.connected:
            raise RuntimeError("RabbitMQ client is not connected")
        self.consumers[queue] = handler
        return f"ctag-{queue}"

    async def cancel(self, queue: str) -> None:
        self.consumers.pop(queue, None)

    async def get_queue_stats(self) -> QueueStats:
        if not self.connected:
            return QueueStats(connected=False, queues=[])
        return QueueStats(
            connected=True,
            queues=[
                QueueInfo(name=name, messages=len(self.payloads(name)), consumers=int(name in self.consumers))
                for name in self.queue_names
            ],
        )

    async def disconnect(self) -> None:
        self.connected = False

    async def ensure_connected(self) -> bool:
        self.reconnect_attempts += 1
        if not self.connected and self.reachable:
            self.connected = True
        return self.connected

    def is_connected(self) -> bool:
        return self.connected


@pytest.fixture
def fake_cache():
    return FakeCache()


@pytest.fixture
def fake_queue():
    return FakeQueue()


@pytest.fixture
def mock_logger():
    """Logger double; every method is a MagicMock."""
    return MagicMock(spec=Logger)
