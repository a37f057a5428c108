from .new import New
from .usecase import EmailUseCase

__all__ = ["New", "EmailUseCase"]
