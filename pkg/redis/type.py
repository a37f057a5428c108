from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class RedisConfig:
    """Configuration for the Redis cache client.

    An empty host leaves the client disconnected (caching disabled).

    Attributes:
        host: Redis host, empty to disable caching
        port: Redis port (default: 6379)
        db: Redis database number (default: 0)
        password: Redis password (optional)
        max_connections: Max connections in pool
        socket_timeout: Socket timeout in seconds
        socket_connect_timeout: Socket connect timeout in seconds
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    db: int = DEFAULT_DB
    password: Optional[str] = None
    encoding: str = DEFAULT_ENCODING
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    socket_timeout: int = DEFAULT_SOCKET_TIMEOUT
    socket_connect_timeout: int = DEFAULT_SOCKET_CONNECT_TIMEOUT

    def __post_init__(self):
        """Validate configuration."""
        if self.port <= 0 or self.port > 65535:
            raise ValueError(ERROR_INVALID_PORT)
        if self.db < 0:
            raise ValueError(ERROR_INVALID_DB)
        if self.max_connections <= 0:
            raise ValueError(ERROR_INVALID_MAX_CONNECTIONS)
        if self.socket_timeout <= 0:
            raise ValueError(ERROR_INVALID_SOCKET_TIMEOUT)

    @property
    def enabled(self) -> bool:
        return bool(self.host and self.host.strip())


@dataclass
class CacheStats:
    """Counters and server figures reported by the cache client."""

    connected: bool = False
    hits: int = 0
    misses: int = 0
    operations: int = 0
    memory: int = 0
    keys: int = 0
    uptime: int = 0

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "hits": self.hits,
            "misses": self.misses,
            "operations": self.operations,
            "memory": self.memory,
            "keys": self.keys,
            "uptime": self.uptime,
        }


__all__ = [
    "RedisConfig",
    "CacheStats",
]
