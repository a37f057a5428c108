from typing import Protocol, runtime_checkable


@runtime_checkable
class IConsumerServer(Protocol):
    """Protocol defining the consumer server interface."""

    async def start(self) -> None:
        """Register a worker on every enabled queue.

        Returns once the consumers are registered; messages are then
        delivered in the background until shutdown.
        """
        ...

    async def shutdown(self) -> None:
        """Cancel the consumers. Safe to call more than once."""
        ...

    def is_running(self) -> bool:
        ...

    def is_ready(self) -> bool:
        """True while every enabled worker is consuming."""
        ...


__all__ = ["IConsumerServer"]
