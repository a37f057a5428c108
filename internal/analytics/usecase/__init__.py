from .new import New
from .usecase import AnalyticsUseCase

__all__ = ["New", "AnalyticsUseCase"]
