"""System Status Domain."""

from .constant import *
from .interface import IStatusUseCase
from .usecase import New as NewStatusUseCase, StatusUseCase

__all__ = [
    "IStatusUseCase",
    "StatusUseCase",
    "NewStatusUseCase",
    "STATUS_HEALTHY",
    "STATUS_UNHEALTHY",
    "MSG_STATUS_FAILED",
]
