from dataclasses import dataclass
from enum import Enum

from pkg.logger.logger import Logger
from pkg.rabbitmq import IQueueClient
from pkg.redis import ICache
from pkg.smtp import IMailSender
from config.config import Config


class WorkerState(str, Enum):
    IDLE = "idle"
    CONSUMING = "consuming"
    PROCESSING = "processing"
    ACKED = "acked"
    NACKED = "nacked"
    STOPPED = "stopped"


@dataclass
class Dependencies:
    """Dependencies container shared by the API and worker processes.

    Attributes:
        logger: Logger instance for structured logging
        cache: Redis cache client
        queue: RabbitMQ queue client
        mail_sender: Sender used by the email worker
        config: Application configuration
    """

    logger: Logger
    cache: ICache
    queue: IQueueClient
    mail_sender: IMailSender
    config: Config


__all__ = ["Dependencies", "WorkerState"]
