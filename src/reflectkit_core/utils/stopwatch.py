"""
Elapsed-time helpers built on the monotonic performance counter.

License: MIT
"""

import functools
import time
from typing import Any, Callable, Optional

from reflectkit_core.loggers.registry import LoggerRegistry

# time.perf_counter_ns() ticks are nanoseconds
TICKS_PER_SECOND = 1_000_000_000


def get_elapsed_milliseconds(ticks: int, frequency: int = TICKS_PER_SECOND) -> float:
    """
    Convert a tick count into fractional milliseconds.

    Args:
        ticks: Elapsed ticks of a monotonic counter
        frequency: Ticks per second of that counter

    Returns:
        Elapsed milliseconds, keeping sub-millisecond precision

    Raises:
        ValueError: If frequency is not positive

    Example:
        >>> get_elapsed_milliseconds(1500, 1000)
        1500.0
    """
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency}")

    return ticks / float(frequency) * 1000.0


class Stopwatch:
    """
    Monotonic stopwatch measuring in perf_counter_ns ticks.

    Accumulates time across start/stop pairs until reset().

    Example:
        ```python
        with Stopwatch() as sw:
            do_work()
        print(f"{sw.elapsed_milliseconds:.3f} ms")
        ```
    """

    frequency = TICKS_PER_SECOND

    def __init__(self) -> None:
        self._elapsed_ticks = 0
        self._started_at: Optional[int] = None

    @classmethod
    def start_new(cls) -> "Stopwatch":
        """Create a stopwatch that is already running."""
        stopwatch = cls()
        stopwatch.start()
        return stopwatch

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed_ticks(self) -> int:
        if self._started_at is None:
            return self._elapsed_ticks
        return self._elapsed_ticks + (time.perf_counter_ns() - self._started_at)

    @property
    def elapsed_milliseconds(self) -> float:
        return get_elapsed_milliseconds(self.elapsed_ticks, self.frequency)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = time.perf_counter_ns()

    def stop(self) -> None:
        if self._started_at is not None:
            self._elapsed_ticks += time.perf_counter_ns() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        self._elapsed_ticks = 0
        self._started_at = None

    def restart(self) -> None:
        self._elapsed_ticks = 0
        self._started_at = time.perf_counter_ns()

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()


def measure_time(source: Optional[str] = None) -> Callable[[Callable], Callable]:
    """
    Decorator timing each call and reporting it as a debug message.

    The report goes through the library logger from the registry and is only
    written when debug messages are enabled there.

    Args:
        source: Source tag for the record (default: the function's qualname)
    """

    def decorator(func: Callable) -> Callable:
        tag = source or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            with Stopwatch() as stopwatch:
                result = func(*args, **kwargs)

            registry = LoggerRegistry.get_instance()
            logger = registry.logger
            if logger is not None and registry.log_debug_messages:
                logger.log_debug(
                    tag, f"'{func.__name__}' took {stopwatch.elapsed_milliseconds:.4f} ms"
                )
            return result

        return wrapper

    return decorator
