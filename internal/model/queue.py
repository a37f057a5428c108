from enum import Enum
from typing import List

from pkg.rabbitmq import QueueDeclaration
from pkg.rabbitmq.constant import DEAD_LETTER_EXCHANGE, DEAD_LETTER_ROUTING_KEY

from .constant import *


class QueueName(str, Enum):
    """Closed set of work queues. Publishing to anything else is refused."""

    EMAIL = "email_queue"
    ANALYTICS = "analytics_queue"
    NOTIFICATIONS = "notifications_queue"


def build_declarations(dead_letter_enabled: bool = True) -> List[QueueDeclaration]:
    """Declarations for every work queue.

    With dead-lettering enabled, a nacked message is routed to the
    dead-letter exchange instead of being dropped.
    """
    declarations = []
    for queue in QueueName:
        declarations.append(
            QueueDeclaration(
                name=queue.value,
                durable=True,
                message_ttl_ms=QUEUE_MESSAGE_TTL_MS,
                max_retries=QUEUE_MAX_RETRIES,
                dead_letter_exchange=DEAD_LETTER_EXCHANGE if dead_letter_enabled else None,
                dead_letter_routing_key=DEAD_LETTER_ROUTING_KEY if dead_letter_enabled else None,
            )
        )
    return declarations


__all__ = ["QueueName", "build_declarations"]
