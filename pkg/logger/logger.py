import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Trace ID of the request or delivery being handled (async-safe)
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(self, trace_id: Optional[str] = None) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...

    def error_with_context(self, error: BaseException, context: str) -> dict: ...


class Logger(ILogger):
    """Logger wrapper around loguru with trace ID support.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.trace_context(trace_id="req_123"):
            logger.info("Processing contact submission")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(service=config.service_name)

        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def attach_trace_id(record):
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or "-"
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_TRACE} | "
            f"{LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=attach_trace_id,
        )

    @contextmanager
    def trace_context(self, trace_id: Optional[str] = None):
        """Bind a trace ID to every record logged inside the block."""
        token = _trace_id_var.set(trace_id) if trace_id else None
        try:
            yield
        finally:
            if token is not None:
                _trace_id_var.reset(token)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).exception(message, **kwargs)

    def error_with_context(self, error: BaseException, context: str) -> dict:
        """Log an error together with where it happened.

        Returns:
            The structured error record that was logged.
        """
        info = {
            "message": str(error) or type(error).__name__,
            "error_type": type(error).__name__,
            CONTEXT_KEY: context,
            TRACE_ID_KEY: _trace_id_var.get(),
        }
        self._loguru.opt(depth=1).bind(**info).error(
            f"{context}: {info['error_type']}: {info['message']}"
        )
        return info


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
