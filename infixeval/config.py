"""Runtime settings for infixeval, read from the environment.

Settings.from_env() returns a complete Settings; CLI options override the
values it finds.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_VAR = "INFIXEVAL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(name: str) -> int:
    """Map a level name (any case) to its logging constant.

    Raises:
        ValueError: The name is not a standard logging level.
    """
    upper = name.strip().upper()
    if upper not in _LEVELS:
        raise ValueError(f"Invalid log level: {name!r}. Choose: {', '.join(_LEVELS)}")
    return getattr(logging, upper)


@dataclass
class Settings:
    """Configuration for the CLI."""

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(log_level=env.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL))

    @property
    def level(self) -> int:
        return parse_log_level(self.log_level)
