from .constant import LogLevel
from .type import LoggerConfig
from .logger import ILogger, Logger

__all__ = ["ILogger", "Logger", "LoggerConfig", "LogLevel"]
