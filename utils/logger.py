# utils/logger.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Logging utility for formula compilation and analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula analysis."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TabulaLogger:
    """Centralized logger for formula analysis with emoji support and structured output."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the Tabula logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TabulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula analysis events
    def formula_compiled(self, source: str, formatted: str, variables):
        """Log a successfully compiled formula."""
        names = ", ".join(variables) if variables else "none"
        self.info(f"📋 {source.strip()} ⟹ {formatted}  [variables: {names}]")

    def classification_result(self, formatted: str, label: str):
        """Log the classification of a single formula."""
        self.info(f"  {formatted}: {label}")

    def joint_result(self, label: str, witness: Optional[str] = None):
        """Log the joint satisfiability verdict."""
        witness_str = f" (witness: {witness})" if witness else ""
        self.info(f"\n>>> JOINT VERDICT: {label}{witness_str} <<<")

    def formula_rejected(self, source: str, description: str, start: int, end: int):
        """Log a formula error with a caret line under the offending span."""
        width = max(end - start, 1)
        self.error(f"❌ {description}")
        self.error(f"    {source}")
        self.error(f"    {' ' * start}{'^' * width}")


class TabulaFormatter(logging.Formatter):
    """Custom formatter for Tabula logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TabulaLogger] = None


def get_logger(name: str = "tabula") -> TabulaLogger:
    """Get or create the global Tabula logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TabulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TabulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(debug: bool = False, quiet: bool = False):
    """Configure logging based on command line flags.

    Results are reported at INFO level, so INFO is the default.

    Args:
        debug: Enable debug output
        quiet: Only report warnings and errors (ignored with debug)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif quiet:
        set_log_level(LogLevel.WARNING)
    else:
        set_log_level(LogLevel.INFO)
