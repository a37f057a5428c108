from .new import New
from .usecase import JobPublisher

__all__ = ["New", "JobPublisher"]
