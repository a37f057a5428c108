import json
from typing import Any, Optional

import redis.asyncio as aioredis
from loguru import logger
from redis.asyncio import ConnectionPool
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from .constant import *
from .interface import ICache
from .type import CacheStats, RedisConfig


class RedisCache(ICache):
    """Redis cache client with TTL, JSON values and hit/miss counters.

    The client degrades instead of raising: while Redis is unreachable
    every read is a miss, every write returns False and stats are zeroed.
    A connection error during any operation flips the client to
    disconnected; ``health_check`` flips it back once Redis answers.

    Example:
        >>> cache = RedisCache(RedisConfig(host="localhost"))
        >>> await cache.connect()
        >>> await cache.set("github:user:alexchen", {"login": "alexchen"}, ttl=3600)
        >>> await cache.get("github:user:alexchen")
        {'login': 'alexchen'}
    """

    def __init__(self, config: RedisConfig):
        self.config = config
        self.client: Optional[aioredis.Redis] = None
        self.pool: Optional[ConnectionPool] = None
        self._connected = False
        self._hits = 0
        self._misses = 0
        self._operations = 0

    async def connect(self) -> None:
        """Create the connection pool and verify Redis answers.

        Never raises; on failure the client stays disconnected.
        """
        if not self.config.enabled:
            logger.warning("Redis host not configured, caching disabled")
            return

        try:
            self.pool = ConnectionPool(
                host=self.config.host,
                port=self.config.port,
                db=self.config.db,
                password=self.config.password,
                encoding=self.config.encoding,
                decode_responses=DEFAULT_DECODE_RESPONSES,
                max_connections=self.config.max_connections,
                socket_timeout=self.config.socket_timeout,
                socket_connect_timeout=self.config.socket_connect_timeout,
            )
            self.client = aioredis.Redis(connection_pool=self.pool)
            await self.client.ping()
            self._connected = True
            logger.info(
                f"Redis connected ({self.config.host}:{self.config.port}/{self.config.db})"
            )
        except Exception as e:
            self._connected = False
            logger.error(f"Redis initialization failed: {e}")

    def is_connected(self) -> bool:
        return self.client is not None and self._connected

    def _handle_error(self, operation: str, key: Optional[str], error: Exception) -> None:
        where = f"Redis {operation}" + (f" for key '{key}'" if key else "")
        if isinstance(error, (RedisConnectionError, RedisTimeoutError)):
            self._connected = False
            logger.error(f"{where}: connection lost: {error}")
        else:
            logger.error(f"{where} failed: {error}")

    async def get(self, key: str) -> Optional[Any]:
        """Get a value and deserialize it from JSON.

        Returns:
            The stored value, or None on miss or when Redis is unavailable
        """
        if not self.is_connected():
            self._misses += 1
            return None

        try:
            self._operations += 1
            raw = await self.client.get(key)
            if raw is None:
                self._misses += 1
                logger.debug(f"Cache MISS for key: {key}")
                return None

            value = json.loads(raw)
            self._hits += 1
            logger.debug(f"Cache HIT for key: {key}")
            return value
        except Exception as e:
            self._handle_error("GET", key, e)
            self._misses += 1
            return None

    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> bool:
        """Serialize a value to JSON and store it with a TTL.

        Args:
            key: Cache key
            value: JSON-serializable value
            ttl: Time-to-live in seconds

        Returns:
            True if stored, False otherwise
        """
        if not self.is_connected():
            return False

        try:
            self._operations += 1
            await self.client.setex(key, ttl, json.dumps(value))
            logger.debug(f"Cache SET for key: {key} (TTL: {ttl}s)")
            return True
        except Exception as e:
            self._handle_error("SET", key, e)
            return False

    async def delete(self, key: str) -> bool:
        if not self.is_connected():
            return False

        try:
            self._operations += 1
            result = await self.client.delete(key)
            logger.debug(f"Cache DELETE for key: {key}")
            return result > 0
        except Exception as e:
            self._handle_error("DELETE", key, e)
            return False

    async def exists(self, key: str) -> bool:
        if not self.is_connected():
            return False

        try:
            result = await self.client.exists(key)
            return result > 0
        except Exception as e:
            self._handle_error("EXISTS", key, e)
            return False

    async def incr_within_limit(self, key: str, limit: int, ttl: int) -> Optional[int]:
        """Atomically increment a counter unless it already reached limit.

        The check and the increment run as one server-side script, and the
        TTL is refreshed on every increment.

        Args:
            key: Counter key
            limit: Highest value the counter may reach
            ttl: Window length in seconds

        Returns:
            The new count, LIMIT_REACHED (-1) when the counter is already at
            the limit, or None when Redis is unavailable
        """
        if not self.is_connected():
            return None

        try:
            self._operations += 1
            result = await self.client.eval(INCR_WITHIN_LIMIT_SCRIPT, 1, key, limit, ttl)
            return int(result)
        except Exception as e:
            self._handle_error("INCR_WITHIN_LIMIT", key, e)
            return None

    async def get_stats(self) -> CacheStats:
        """Report counters plus best-effort server memory, key count and uptime."""
        stats = CacheStats(
            connected=self.is_connected(),
            hits=self._hits,
            misses=self._misses,
            operations=self._operations,
        )
        if not stats.connected:
            return stats

        try:
            memory_info = await self.client.info("memory")
            keys = await self.client.dbsize()
            server_info = await self.client.info("server")

            stats.memory = int(memory_info.get(INFO_USED_MEMORY, 0))
            stats.keys = int(keys)
            stats.uptime = int(server_info.get(INFO_UPTIME, 0))
        except Exception as e:
            self._handle_error("INFO", None, e)
            stats.connected = self.is_connected()
        return stats

    async def flush(self) -> bool:
        if not self.is_connected():
            return False

        try:
            await self.client.flushdb()
            logger.info("Redis cache flushed")
            return True
        except Exception as e:
            self._handle_error("FLUSHDB", None, e)
            return False

    async def health_check(self) -> bool:
        """Ping Redis and update the connected flag from the answer."""
        if self.client is None:
            return False

        try:
            self._connected = bool(await self.client.ping())
        except Exception as e:
            if self._connected:
                logger.warning(f"Redis health check failed: {e}")
            self._connected = False
        return self._connected

    async def disconnect(self) -> None:
        """Close the client and its pool. Safe to call more than once."""
        self._connected = False
        client, pool = self.client, self.pool
        self.client, self.pool = None, None

        try:
            if client is not None:
                await client.aclose()
            if pool is not None:
                await pool.disconnect()
            if client is not None:
                logger.info("Redis connection closed")
        except Exception as e:
            logger.error(f"Error closing Redis connection: {e}")


__all__ = ["RedisCache"]
