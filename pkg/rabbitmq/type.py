from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constant import *


@dataclass
class RabbitMQConfig:
    """RabbitMQ connection configuration.

    An empty url leaves the client disconnected (queuing disabled).
    """

    url: str = ""
    prefetch_count: int = DEFAULT_PREFETCH_COUNT
    dead_letter_exchange: str = DEAD_LETTER_EXCHANGE
    dead_letter_queue: str = DEAD_LETTER_QUEUE
    dead_letter_routing_key: str = DEAD_LETTER_ROUTING_KEY

    def __post_init__(self):
        """Validate configuration."""
        if self.prefetch_count <= 0:
            raise ValueError(
                ERROR_PREFETCH_COUNT_POSITIVE.format(count=self.prefetch_count)
            )

    @property
    def enabled(self) -> bool:
        return bool(self.url and self.url.strip())


@dataclass(frozen=True)
class QueueDeclaration:
    """A named queue and the policy it is declared with."""

    name: str
    durable: bool = DEFAULT_DURABLE
    message_ttl_ms: int = DEFAULT_MESSAGE_TTL_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    dead_letter_exchange: Optional[str] = None
    dead_letter_routing_key: Optional[str] = None

    def __post_init__(self):
        """Validate declaration."""
        if not self.name or not self.name.strip():
            raise ValueError(ERROR_QUEUE_NAME_EMPTY)
        if self.message_ttl_ms <= 0:
            raise ValueError(ERROR_MESSAGE_TTL_POSITIVE.format(ttl=self.message_ttl_ms))
        if self.max_retries < 0:
            raise ValueError(ERROR_MAX_RETRIES_NEGATIVE.format(retries=self.max_retries))

    def arguments(self) -> Dict[str, Any]:
        """Queue arguments sent with the declaration."""
        args: Dict[str, Any] = {
            ARG_MESSAGE_TTL: self.message_ttl_ms,
            ARG_MAX_RETRIES: self.max_retries,
        }
        if self.dead_letter_exchange:
            args[ARG_DEAD_LETTER_EXCHANGE] = self.dead_letter_exchange
            if self.dead_letter_routing_key:
                args[ARG_DEAD_LETTER_ROUTING_KEY] = self.dead_letter_routing_key
        return args


@dataclass
class QueueInfo:
    name: str
    messages: int = 0
    consumers: int = 0

    def to_dict(self) -> dict:
        return {"name": self.name, "messages": self.messages, "consumers": self.consumers}


@dataclass
class QueueStats:
    connected: bool = False
    queues: List[QueueInfo] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "queues": [q.to_dict() for q in self.queues],
        }


__all__ = [
    "RabbitMQConfig",
    "QueueDeclaration",
    "QueueInfo",
    "QueueStats",
]
