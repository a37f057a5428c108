from .new import New
from .usecase import StatusUseCase

__all__ = ["New", "StatusUseCase"]
