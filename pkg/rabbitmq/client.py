from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import aio_pika
from aio_pika import DeliveryMode, ExchangeType, Message
from aio_pika.abc import (
    AbstractQueue,
    AbstractRobustChannel,
    AbstractRobustConnection,
)
from aio_pika.exceptions import DeliveryError
from loguru import logger

from .constant import *
from .interface import IQueueClient, MessageHandler
from .type import QueueDeclaration, QueueInfo, QueueStats, RabbitMQConfig


class RabbitMQError(RuntimeError):
    """Raised when a consumer cannot be registered on the broker."""


class RabbitMQClient(IQueueClient):
    """RabbitMQ client owning one robust connection and one channel.

    On connect it declares every queue in ``declarations`` plus the
    dead-letter exchange/queue pair. Publishing never raises: while the
    broker is unreachable ``publish`` returns False. Consumers use manual
    acknowledgment; the registered handler decides ack or nack.

    Attributes:
        config: RabbitMQ configuration
        declarations: Queues declared at connect time
        connection: Active robust connection
        channel: Active robust channel
    """

    def __init__(self, config: RabbitMQConfig, declarations: Sequence[QueueDeclaration]):
        self.config = config
        self.declarations: List[QueueDeclaration] = list(declarations)
        self.connection: Optional[AbstractRobustConnection] = None
        self.channel: Optional[AbstractRobustChannel] = None
        self._queues: Dict[str, AbstractQueue] = {}
        self._consumer_tags: Dict[str, str] = {}
        self._connected = False

    async def connect(self) -> None:
        """Connect, open a channel and declare the queue topology.

        Never raises; on failure the client stays disconnected.
        """
        if not self.config.enabled:
            logger.warning("RabbitMQ URL not configured, message queuing disabled")
            return

        try:
            logger.info("Connecting to RabbitMQ...")
            self.connection = await aio_pika.connect_robust(self.config.url)
            self.connection.close_callbacks.add(self._on_connection_closed)
            self.connection.reconnect_callbacks.add(self._on_reconnected)

            self.channel = await self.connection.channel()
            await self.channel.set_qos(prefetch_count=self.config.prefetch_count)

            await self._declare_topology()

            self._connected = True
            logger.info("RabbitMQ connected successfully")
        except Exception as e:
            self._connected = False
            logger.error(f"RabbitMQ initialization failed: {e}")

    async def _declare_topology(self) -> None:
        for declaration in self.declarations:
            self._queues[declaration.name] = await self.channel.declare_queue(
                declaration.name,
                durable=declaration.durable,
                arguments=declaration.arguments(),
            )
            logger.info(f"Queue declared: {declaration.name}")

        dead_letter_exchange = await self.channel.declare_exchange(
            self.config.dead_letter_exchange,
            ExchangeType.DIRECT,
            durable=True,
        )
        dead_letter_queue = await self.channel.declare_queue(
            self.config.dead_letter_queue, durable=True
        )
        await dead_letter_queue.bind(
            dead_letter_exchange, routing_key=self.config.dead_letter_routing_key
        )
        logger.info(
            f"Dead-letter queue '{self.config.dead_letter_queue}' bound to "
            f"'{self.config.dead_letter_exchange}' (routing_key={self.config.dead_letter_routing_key})"
        )

    async def ensure_connected(self) -> bool:
        """Retry the initial connect when it never succeeded.

        A robust connection that was established once reconnects by itself,
        so this only acts when there is no usable connection or channel.

        Returns:
            True if connected after the attempt
        """
        if self.is_connected():
            return True
        if not self.config.enabled:
            return False
        if (
            self.connection is not None
            and not self.connection.is_closed
            and self.channel is not None
        ):
            # aio-pika is already reconnecting this one
            return False

        if self.connection is not None:
            try:
                await self.connection.close()
            except Exception as e:
                logger.warning(f"Error closing stale RabbitMQ connection: {e}")
        self.connection = None
        self.channel = None
        self._queues.clear()

        await self.connect()
        return self.is_connected()

    def _on_connection_closed(self, *args: Any) -> None:
        if self._connected:
            logger.warning("RabbitMQ connection closed")
        self._connected = False

    def _on_reconnected(self, *args: Any) -> None:
        logger.info("RabbitMQ connection re-established")
        self._connected = True

    def is_connected(self) -> bool:
        return (
            self._connected
            and self.connection is not None
            and not self.connection.is_closed
            and self.channel is not None
            and not self.channel.is_closed
        )

    @property
    def queue_names(self) -> List[str]:
        return [d.name for d in self.declarations]

    async def publish(self, queue: str, payload: Any) -> bool:
        """Publish a payload as a persistent JSON message.

        Args:
            queue: Name of a declared queue
            payload: JSON-serializable payload

        Returns:
            True if the broker accepted the message, False otherwise
        """
        if not self.is_connected():
            logger.warning(f"Cannot publish to {queue}: RabbitMQ not connected")
            return False

        if queue not in self.queue_names:
            logger.error(ERROR_QUEUE_NOT_DECLARED.format(queue=queue))
            return False

        try:
            body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
            message = Message(
                body,
                delivery_mode=DeliveryMode.PERSISTENT,
                content_type=CONTENT_TYPE_JSON,
                timestamp=datetime.now(timezone.utc),
                message_id=str(uuid.uuid4()),
            )
            await self.channel.default_exchange.publish(message, routing_key=queue)
            logger.debug(f"Message published to {queue} ({len(body)} bytes)")
            return True
        except DeliveryError as e:
            logger.warning(f"Failed to publish message to {queue}: broker rejected it: {e}")
            return False
        except Exception as e:
            logger.error(f"RabbitMQ publish to {queue} failed: {e}")
            return False

    async def consume(self, queue: str, handler: MessageHandler) -> str:
        """Start consuming a declared queue with manual acknowledgment.

        Args:
            queue: Name of a declared queue
            handler: Async callable receiving each delivery; it must ack or nack

        Returns:
            Consumer tag

        Raises:
            RabbitMQError: If not connected or the queue is not declared
        """
        if not self.is_connected():
            raise RabbitMQError(ERROR_NOT_CONNECTED)
        if queue not in self._queues:
            raise RabbitMQError(ERROR_QUEUE_NOT_DECLARED.format(queue=queue))

        tag = await self._queues[queue].consume(handler, no_ack=False)
        self._consumer_tags[queue] = tag
        logger.info(f"Consumer started on queue '{queue}' (tag={tag})")
        return tag

    async def cancel(self, queue: str) -> None:
        """Stop the consumer registered on a queue, if any."""
        tag = self._consumer_tags.pop(queue, None)
        if tag is None or queue not in self._queues:
            return
        try:
            await self._queues[queue].cancel(tag)
            logger.info(f"Consumer on queue '{queue}' cancelled")
        except Exception as e:
            logger.error(f"Error cancelling consumer on '{queue}': {e}")

    async def get_queue_stats(self) -> QueueStats:
        """Best-effort message and consumer counts per declared queue."""
        if not self.is_connected():
            return QueueStats(connected=False, queues=[])

        try:
            queues = []
            for name in self.queue_names:
                queue = await self.channel.declare_queue(name, passive=True)
                result = queue.declaration_result
                queues.append(
                    QueueInfo(
                        name=name,
                        messages=result.message_count or 0,
                        consumers=result.consumer_count or 0,
                    )
                )
            return QueueStats(connected=True, queues=queues)
        except Exception as e:
            logger.error(f"RabbitMQ queue stats failed: {e}")
            return QueueStats(connected=False, queues=[])

    async def disconnect(self) -> None:
        """Close channel then connection. Safe to call more than once."""
        self._connected = False
        try:
            for queue in list(self._consumer_tags):
                await self.cancel(queue)

            if self.channel and not self.channel.is_closed:
                await self.channel.close()
            if self.connection and not self.connection.is_closed:
                await self.connection.close()
                logger.info("RabbitMQ disconnected")
        except Exception as e:
            logger.error(f"RabbitMQ disconnect failed: {e}")
        finally:
            self._queues.clear()


__all__ = ["RabbitMQClient"]
