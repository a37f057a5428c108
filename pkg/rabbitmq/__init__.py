from .type import QueueDeclaration, QueueInfo, QueueStats, RabbitMQConfig
from .interface import IQueueClient, MessageHandler
from .client import RabbitMQClient, RabbitMQError
from .constant import (
    DEAD_LETTER_EXCHANGE,
    DEAD_LETTER_QUEUE,
    DEAD_LETTER_ROUTING_KEY,
)

__all__ = [
    # Interfaces
    "IQueueClient",
    "MessageHandler",
    # Implementations
    "RabbitMQClient",
    "RabbitMQError",
    # Types
    "RabbitMQConfig",
    "QueueDeclaration",
    "QueueInfo",
    "QueueStats",
    # Constants
    "DEAD_LETTER_EXCHANGE",
    "DEAD_LETTER_QUEUE",
    "DEAD_LETTER_ROUTING_KEY",
]
