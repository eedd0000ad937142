# utils/__init__.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level
from .renderer import render, render_state, render_transition

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "render",
    "render_state",
    "render_transition",
]
