from .type import CacheStats, RedisConfig
from .interface import ICache
from .redis import RedisCache
from .constant import LIMIT_REACHED

__all__ = [
    "ICache",
    "RedisCache",
    "RedisConfig",
    "CacheStats",
    "LIMIT_REACHED",
]
