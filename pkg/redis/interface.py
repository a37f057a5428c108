"""Interface for cache operations."""

from typing import Any, Optional, Protocol, runtime_checkable

from .type import CacheStats


@runtime_checkable
class ICache(Protocol):
    """Protocol for a TTL key-value cache.

    Implementations never raise on transport failure; they degrade to a
    miss / False / zeroed stats instead.
    """

    async def get(self, key: str) -> Optional[Any]:
        """Get a deserialized value, or None on miss."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 3600) -> bool:
        """Serialize and store a value with a TTL in seconds."""
        ...

    async def delete(self, key: str) -> bool:
        """Delete a key."""
        ...

    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        ...

    async def incr_within_limit(self, key: str, limit: int, ttl: int) -> Optional[int]:
        """Atomically increment a counter unless it already reached limit."""
        ...

    async def get_stats(self) -> CacheStats:
        """Report connection flag, counters and server figures."""
        ...

    async def flush(self) -> bool:
        """Remove every key in the current database."""
        ...

    def is_connected(self) -> bool:
        """Check whether the store is currently reachable."""
        ...

    async def health_check(self) -> bool:
        """Ping the store and refresh the connected flag."""
        ...

    async def disconnect(self) -> None:
        """Release the connection pool."""
        ...


__all__ = ["ICache"]
