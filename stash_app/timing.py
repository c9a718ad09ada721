"""Wall-clock and CPU timing for individual operations."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def with_timing(label: str, operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run ``operation`` and log how long it took at DEBUG level.

    Nothing is logged when the operation raises.
    """

    clock_start = time.perf_counter()
    cpu_start = time.process_time()
    result = operation(*args, **kwargs)
    clock_ms = (time.perf_counter() - clock_start) * 1000.0
    cpu_ms = (time.process_time() - cpu_start) * 1000.0
    logger.debug("%s [clock=%.6fms, cpu=%.6fms]", label, clock_ms, cpu_ms)
    return result


__all__ = ["with_timing"]
