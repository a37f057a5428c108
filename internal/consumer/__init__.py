"""Consumer package.

This package contains:
- Dependencies: Struct holding all service dependencies
- ConsumerRegistry: Wires usecases and queue handlers
- QueueWorker: Manual-ack worker for one queue
- ConsumerServer: Starts and stops the workers
"""

from .type import Dependencies, WorkerState
from .interface import IConsumerServer
from .registry import ConsumerRegistry, DomainServices
from .worker import QueueWorker
from .server import ConsumerServer

__all__ = [
    "Dependencies",
    "WorkerState",
    "IConsumerServer",
    "ConsumerRegistry",
    "DomainServices",
    "QueueWorker",
    "ConsumerServer",
]
