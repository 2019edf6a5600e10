"""
Logging with Rich.

Two layers:
- setup_logging/get_logger: stdlib loggers for library diagnostics,
  rendered by Rich once an application opts in.
- ConsoleLogger: leveled, colorized console lines for application code.
"""

import logging
from datetime import datetime
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from smart_utils.config import Settings, get_settings
from smart_utils.errors import InvalidArgumentError
from smart_utils.temporal.patterns import compile_pattern


LIBRARY_LOGGER = "smart_utils"


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """
    Attach a Rich handler to the smart_utils logger.

    Only the library's own logger is configured; the root logger and
    the application's handlers are left alone. Calling it again swaps
    the handler instead of adding a second one.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Console to render into; stderr when omitted

    Returns:
        The configured library logger
    """
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if isinstance(handler, RichHandler):
            library_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s", datefmt="[%X]"))
    library_logger.addHandler(handler)
    library_logger.setLevel(level.upper())
    return library_logger


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Uses lru_cache to avoid creating duplicate loggers.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


logger = get_logger(__name__)


# ============================================================================
# Console Logger
# ============================================================================

class LogLevel(str, Enum):
    """Console logger levels, lowest first."""

    DEBUG = "debug"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def severity(self) -> int:
        """Position in the severity order."""
        return list(LogLevel).index(self)


LEVEL_STYLES = {
    LogLevel.DEBUG: "magenta",
    LogLevel.INFO: "cyan",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


class LoggerConfig(BaseModel):
    """Runtime switches for a ConsoleLogger."""

    enabled: bool = Field(default=True, description="Print anything at all")
    min_level: LogLevel = Field(default=LogLevel.DEBUG, description="Lowest level printed")
    show_timestamp: bool = Field(default=True, description="Prefix lines with a timestamp")
    timestamp_format: str | None = Field(
        default="HH:mm:ss",
        description="Date pattern for timestamps; None means ISO-8601",
    )
    log_file: Path | None = Field(default=None, description="Plain-text copy of each line")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoggerConfig":
        """Build a config from library settings."""
        return cls(
            enabled=settings.log_enabled,
            min_level=LogLevel(settings.log_level.lower()),
            show_timestamp=settings.log_show_timestamp,
            timestamp_format=settings.log_timestamp_format,
            log_file=settings.log_file,
        )


class ConsoleLogger:
    """
    Colorful leveled console logger.

    Each call writes at most one line. Lines are suppressed when the
    logger is disabled or the level is below config.min_level.

    Usage:
        log = ConsoleLogger()
        log.success("Upload finished")
        log.config.min_level = LogLevel.WARNING
    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or LoggerConfig()
        self.console = console or Console(highlight=False)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        console: Console | None = None,
    ) -> "ConsoleLogger":
        """Create a logger configured from SMART_UTILS_* settings."""
        return cls(LoggerConfig.from_settings(settings or get_settings()), console)

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def success(self, message: str) -> None:
        self.log(LogLevel.SUCCESS, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether a message at level would be printed."""
        return self.config.enabled and level.severity >= self.config.min_level.severity

    def log(self, level: LogLevel, message: str) -> None:
        """Format and print one line at the given level."""
        if not self.is_enabled_for(level):
            return

        line = self.format_line(level, message)
        # Text avoids markup parsing of user messages
        self.console.print(Text(line, style=LEVEL_STYLES[level]), soft_wrap=True)

        if self.config.log_file is not None:
            self._append_to_file(self.config.log_file, line)

    def format_line(self, level: LogLevel, message: str, now: datetime | None = None) -> str:
        """Render a line without color codes."""
        prefix = ""
        if self.config.show_timestamp:
            prefix = f"[{self._timestamp(now or datetime.now())}] "
        return f"{prefix}[{level.value.upper()}] {message}"

    def _timestamp(self, now: datetime) -> str:
        if not self.config.timestamp_format:
            return now.isoformat()
        try:
            return compile_pattern(self.config.timestamp_format).format(now)
        except InvalidArgumentError:
            return now.isoformat()

    def _append_to_file(self, path: Path, line: str) -> None:
        try:
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        except OSError as e:
            logger.warning(f"Could not write log line to {path}: {e}")
