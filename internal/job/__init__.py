"""Job Domain.

Publishes email, analytics and notification jobs onto their queues.
"""

from .interface import IJobPublisher
from .usecase import New as NewJobPublisher, JobPublisher

__all__ = ["IJobPublisher", "JobPublisher", "NewJobPublisher"]
