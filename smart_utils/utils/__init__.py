"""
Utility modules for smart_utils.

Provides the colorized console logger and library logging setup.
"""

from smart_utils.utils.logger import (
    ConsoleLogger,
    LoggerConfig,
    LogLevel,
    get_logger,
    setup_logging,
)

__all__ = [
    # Console logger
    "ConsoleLogger",
    "LoggerConfig",
    "LogLevel",
    # Library logging
    "get_logger",
    "setup_logging",
]
