# utils/logger.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Logging utility for model and trace decoding with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the tracer."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TracerLogger:
    """Centralized logger for the tracer with structured diagnostic output.

    Diagnostics are written to standard error so that they never interleave
    with the rendered trace on standard output.
    """

    def __init__(self, name: str = "tracer", level: LogLevel = LogLevel.WARNING):
        """Initialize the tracer logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TracerFormatter())

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
        """Log debug message (detailed decoding progress)."""
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

    # Specialized methods for decoding events
    def section_loaded(self, section: str, records: int, first_line: int):
        """Log completion of one intermediate-format section."""
        self.debug(f"Section '{section}' at line {first_line}: {records} record(s)")

    def numbering_mismatch(self, what: str, declared: int, actual: int, lineno: int):
        """Log a declared index that disagrees with the declaration order."""
        self.warning(
            f"line {lineno}: {what} declares index {declared} but is number {actual}; "
            f"using declaration order"
        )

    def model_summary(self, model_str: str):
        """Log the shape of a loaded model."""
        self.info(f"Loaded {model_str}")

    def state_decoded(self, locations, variables, overrides: int):
        """Log a decoded symbolic state."""
        self.debug(
            f"    State: locations={list(locations)}, variables={list(variables)}, "
            f"{overrides} explicit bound(s)"
        )

    def transition_decoded(self, edges: str, legacy: bool = False):
        """Log a decoded transition."""
        marker = " (legacy edge numbering)" if legacy else ""
        self.debug(f"    Transition: {edges}{marker}")

    def trace_summary(self, steps: int):
        """Log the size of a decoded trace."""
        self.info(f"Decoded trace with {steps} step(s)")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.info(f"OK {message}" if message else "OK Validation successful")
        else:
            self.error(f"FAILED {message}" if message else "FAILED Validation failed")


class TracerFormatter(logging.Formatter):
    """Custom formatter with level prefixes for everything but INFO."""

    def format(self, record):
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TracerLogger] = None


def get_logger(name: str = "tracer") -> TracerLogger:
    """Get or create the global tracer logger instance.

    Args:
        name: Logger name (default: "tracer")

    Returns:
        TracerLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TracerLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
