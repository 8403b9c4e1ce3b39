"""
Utilities for ReflectKit Core.

Provides digit counting, elapsed-time helpers and logger convenience functions.

License: MIT
"""

from .digits import IntegerWidth, count_digits
from .logger_factory import configure_logging, get_logger
from .stopwatch import TICKS_PER_SECOND, Stopwatch, get_elapsed_milliseconds, measure_time

__all__ = [
    "get_logger",
    "configure_logging",
    "count_digits",
    "IntegerWidth",
    "get_elapsed_milliseconds",
    "measure_time",
    "Stopwatch",
    "TICKS_PER_SECOND",
]
