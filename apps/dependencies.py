"""Dependency construction shared by the API and consumer processes."""

from pkg.logger.logger import Logger, LoggerConfig
from pkg.rabbitmq import RabbitMQClient, RabbitMQConfig as RabbitMQPkgConfig
from pkg.redis import RedisCache, RedisConfig as RedisPkgConfig
from pkg.smtp import SMTPConfig as SMTPPkgConfig, new_sender
from config.config import Config
from internal.consumer import Dependencies
from internal.model import build_declarations
from internal.model.constant import (
    LOGGER_SERVICE_NAME,
    LOGGER_ENABLE_CONSOLE,
    LOGGER_COLORIZE,
)


async def init_dependencies(config: Config) -> Dependencies:
    """Initialize all service dependencies.

    Neither client raises when its backend is down: the cache degrades to
    misses and the queue client refuses publishes until it reconnects.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances
    """
    logger = Logger(
        LoggerConfig(
            level="DEBUG" if config.logging.debug else config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=LOGGER_COLORIZE,
            service_name=LOGGER_SERVICE_NAME,
        )
    )
    logger.info("Logger initialized")

    # Initialize Redis
    cache = RedisCache(
        RedisPkgConfig(
            host=config.redis.host,
            port=config.redis.port,
            db=config.redis.db,
            password=config.redis.password,
            max_connections=config.redis.max_connections,
        )
    )
    await cache.connect()
    if cache.is_connected():
        logger.info("Redis connection verified")
    else:
        logger.warning("Redis unavailable, running without cache")

    # Initialize RabbitMQ
    queue = RabbitMQClient(
        RabbitMQPkgConfig(
            url=config.rabbitmq.url,
            prefetch_count=config.rabbitmq.prefetch_count,
        ),
        build_declarations(config.rabbitmq.dead_letter_enabled),
    )
    await queue.connect()
    if queue.is_connected():
        logger.info("RabbitMQ connection verified")
    else:
        logger.warning("RabbitMQ unavailable, jobs will not be queued")

    # Initialize mail sender
    mail_sender = new_sender(
        SMTPPkgConfig(
            host=config.smtp.host,
            port=config.smtp.port,
            username=config.smtp.username,
            password=config.smtp.password,
            from_address=config.smtp.from_address,
            timeout=config.smtp.timeout,
        )
    )
    logger.info("Mail sender initialized")

    return Dependencies(
        logger=logger,
        cache=cache,
        queue=queue,
        mail_sender=mail_sender,
        config=config,
    )


async def close_dependencies(deps: Dependencies) -> None:
    """Disconnect queue then cache. Safe on partially started deps."""
    deps.logger.info("Cleaning up dependencies...")
    await deps.queue.disconnect()
    await deps.cache.disconnect()
