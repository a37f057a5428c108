import asyncio
import signal

from config.config import load_config
from internal.consumer import ConsumerServer
from apps.dependencies import close_dependencies, init_dependencies


async def main():
    """Main entry point for the queue worker service.

    Raises:
        RuntimeError: If the broker is unreachable at startup
    """
    deps = None
    server = None
    logger = None

    try:
        app_config = load_config()
        deps = await init_dependencies(app_config)
        logger = deps.logger

        if not deps.queue.is_connected():
            raise RuntimeError("RabbitMQ is not connected, nothing to consume")

        server = ConsumerServer(deps)
        stop_event = asyncio.Event()

        # Setup signal handlers for graceful shutdown
        loop = asyncio.get_running_loop()

        def signal_handler(sig):
            logger.info(f"Received signal {sig}, shutting down gracefully...")
            stop_event.set()

        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        await server.start()
        logger.info("Consumer service running, waiting for messages...")
        await stop_event.wait()

    except Exception as e:
        if logger:
            logger.error(f"Failed to run consumer: {e}")
            logger.exception("Consumer error:")
        raise
    finally:
        if server:
            await server.shutdown()
        if deps:
            await close_dependencies(deps)


def run():
    """Entry point for console script."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown complete")


if __name__ == "__main__":
    run()
