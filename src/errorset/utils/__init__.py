"""
Utility helpers shared across errorset packages.
"""

from .logging import Timing, configure_logging, get_logger, time_call

__all__ = ["Timing", "configure_logging", "get_logger", "time_call"]
