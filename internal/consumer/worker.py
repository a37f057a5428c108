import json
from typing import Any, Dict, Optional, Protocol

from aio_pika.abc import AbstractIncomingMessage

from pkg.logger.logger import Logger
from pkg.rabbitmq import IQueueClient

from .type import WorkerState


class IPayloadHandler(Protocol):
    async def handle(self, payload: Dict[str, Any]) -> None:
        ...


class QueueWorker:
    """Consumes one queue with manual acknowledgment.

    Each delivery is decoded and passed to the handler. Success acks it;
    any failure (bad JSON, invalid payload, failed side effect) nacks it
    without requeue, so the broker dead-letters or drops it. Errors never
    escape ``on_message``, so one bad message cannot stop the worker.
    """

    def __init__(
        self,
        queue_name: str,
        handler: IPayloadHandler,
        client: IQueueClient,
        logger: Optional[Logger] = None,
    ):
        self.queue_name = queue_name
        self.handler = handler
        self.client = client
        self.logger = logger
        self.state = WorkerState.IDLE
        self.processed = 0
        self.failed = 0

    async def start(self) -> None:
        await self.client.consume(self.queue_name, self.on_message)
        self.state = WorkerState.CONSUMING
        if self.logger:
            self.logger.info(f"[QueueWorker] Worker started on {self.queue_name}")

    async def stop(self) -> None:
        await self.client.cancel(self.queue_name)
        self.state = WorkerState.STOPPED

    async def on_message(self, message: AbstractIncomingMessage) -> None:
        if self.state == WorkerState.STOPPED:
            return

        self.state = WorkerState.PROCESSING
        try:
            payload = json.loads(message.body.decode("utf-8"))
            await self.handler.handle(payload)
        except Exception as exc:
            self.failed += 1
            if self.logger:
                self.logger.error_with_context(
                    exc, f"{self.queue_name} worker processing (message_id={message.message_id})"
                )
            await self._settle(message, ack=False)
        else:
            self.processed += 1
            await self._settle(message, ack=True)
        finally:
            if self.state != WorkerState.STOPPED:
                self.state = WorkerState.CONSUMING

    async def _settle(self, message: AbstractIncomingMessage, ack: bool) -> None:
        try:
            if ack:
                await message.ack()
                self.state = WorkerState.ACKED
            else:
                await message.nack(requeue=False)
                self.state = WorkerState.NACKED
        except Exception as exc:
            # Channel gone; the broker redelivers unacked messages after reconnect
            if self.logger:
                self.logger.error_with_context(exc, f"{self.queue_name} worker settle")


__all__ = ["QueueWorker", "IPayloadHandler"]
