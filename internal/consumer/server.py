from typing import Dict, List, Optional, Tuple

from internal.model import QueueName

from .interface import IConsumerServer
from .registry import ConsumerRegistry, DomainServices
from .type import Dependencies, WorkerState
from .worker import IPayloadHandler, QueueWorker


class ConsumerServer(IConsumerServer):
    """Runs one QueueWorker per enabled queue on the shared queue client.

    Starting the workers is an explicit step. ``is_ready`` is the
    readiness signal: true only while every enabled worker is consuming.
    """

    def __init__(self, deps: Dependencies, services: Optional[DomainServices] = None):
        self.deps = deps
        self.logger = deps.logger
        self.services = services
        self.workers: Dict[str, QueueWorker] = {}
        self._running = False

    def _enabled_handlers(self) -> List[Tuple[QueueName, IPayloadHandler]]:
        workers_config = self.deps.config.workers
        handlers = []
        if workers_config.email_enabled:
            handlers.append((QueueName.EMAIL, self.services.email_handler))
        if workers_config.analytics_enabled:
            handlers.append((QueueName.ANALYTICS, self.services.analytics_handler))
        return handlers

    async def start(self) -> None:
        if self._running:
            return

        if self.services is None:
            self.services = ConsumerRegistry(self.deps).initialize()

        if not self.deps.queue.is_connected():
            self.logger.warning("RabbitMQ not connected, workers not started")
            return

        handlers = self._enabled_handlers()
        if not handlers:
            self.logger.warning("No workers enabled, server will not consume messages")
            return

        try:
            for queue, handler in handlers:
                worker = QueueWorker(
                    queue_name=queue.value,
                    handler=handler,
                    client=self.deps.queue,
                    logger=self.logger,
                )
                await worker.start()
                self.workers[queue.value] = worker
        except Exception as e:
            self.logger.error(f"Failed to start consumer server: {e}")
            await self.shutdown()
            raise

        self._running = True
        self.logger.info(f"Consumer server started with {len(self.workers)} worker(s)")

    async def shutdown(self) -> None:
        self.logger.info("Shutting down consumer server...")
        self._running = False
        for worker in self.workers.values():
            try:
                await worker.stop()
            except Exception as e:
                self.logger.error(f"Error stopping worker on {worker.queue_name}: {e}")
        self.workers.clear()
        self.logger.info("Consumer server shutdown complete")

    def is_running(self) -> bool:
        return self._running

    def is_ready(self) -> bool:
        if not self._running or not self.workers:
            return False
        if not self.deps.queue.is_connected():
            return False
        return all(w.state != WorkerState.STOPPED for w in self.workers.values())


__all__ = ["ConsumerServer"]
