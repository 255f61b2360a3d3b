"""Logging configuration for applications using bigdecimal.

The library itself only emits structlog events (sqrt_iteration,
precision_truncated) and never configures structlog. Entry points such as
the command line call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

import structlog

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


@dataclass(frozen=True)
class LogConfig:
    """Logging settings.

    Attributes:
        level: Minimum level to emit (debug, info, warning, error, critical)
        json: Render events as JSON lines instead of the console format
    """

    level: str = "warning"
    json: bool = False

    @classmethod
    def from_env(cls) -> LogConfig:
        """Read settings from the environment.

        - BIGDECIMAL_LOG_LEVEL: Minimum level (default: warning)
        - BIGDECIMAL_LOG_JSON: JSON output if true/1/yes (default: false)
        """
        return cls(
            level=os.environ.get("BIGDECIMAL_LOG_LEVEL", "warning").lower(),
            json=os.environ.get("BIGDECIMAL_LOG_JSON", "false").lower() in ("true", "1", "yes"),
        )

    @property
    def numeric_level(self) -> int:
        """The stdlib logging level for `level`.

        Raises:
            ValueError: If level is not a known level name
        """
        try:
            return _LEVELS[self.level.lower()]
        except KeyError:
            raise ValueError(f"Unknown log level: {self.level!r}") from None


DEFAULT_LOG_CONFIG = LogConfig()


def configure_logging(config: LogConfig = DEFAULT_LOG_CONFIG) -> None:
    """Install the structlog pipeline described by config.

    Events go to stderr so they never mix with program output.
    """
    renderer = structlog.processors.JSONRenderer() if config.json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(config.numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
