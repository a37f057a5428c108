"""Factory function for creating the submission gate."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.redis import ICache

from ..type import Config
from .usecase import SubmissionGate


def New(config: Config, cache: ICache, logger: Optional[Logger] = None) -> SubmissionGate:
    """Create a new submission gate.

    Raises:
        ValueError: If config or cache is missing
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")
    if cache is None:
        raise ValueError("cache is required")
    return SubmissionGate(config=config, cache=cache, logger=logger)


__all__ = ["New"]
