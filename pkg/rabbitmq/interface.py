"""Interfaces for RabbitMQ message operations."""

from typing import Any, Awaitable, Callable, Protocol, runtime_checkable

from aio_pika.abc import AbstractIncomingMessage

from .type import QueueStats

MessageHandler = Callable[[AbstractIncomingMessage], Awaitable[None]]


@runtime_checkable
class IQueueClient(Protocol):
    """Protocol for a durable queue client.

    Publishing never raises: a disconnected broker or a rejected message
    yields False.
    """

    async def connect(self) -> None:
        """Connect and declare the queue topology."""
        ...

    async def publish(self, queue: str, payload: Any) -> bool:
        """Publish a JSON payload to a declared queue."""
        ...

    async def consume(self, queue: str, handler: MessageHandler) -> str:
        """Register a manual-ack consumer, returning its consumer tag."""
        ...

    async def cancel(self, queue: str) -> None:
        """Stop the consumer registered on a queue."""
        ...

    async def get_queue_stats(self) -> QueueStats:
        """Report message and consumer counts per declared queue."""
        ...

    async def disconnect(self) -> None:
        """Close channel and connection."""
        ...

    async def ensure_connected(self) -> bool:
        """Retry a connect that never succeeded."""
        ...

    def is_connected(self) -> bool:
        """Check if connected to the broker."""
        ...


__all__ = ["IQueueClient", "MessageHandler"]
