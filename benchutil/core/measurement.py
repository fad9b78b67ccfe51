# Path: benchutil/core/measurement.py
"""
Measurement

Minimal harness turning repeated calls of a function into a Result:
wall time from time.perf_counter_ns(), allocated bytes and blocks
from tracemalloc snapshot differences. Tracing slows the calls down,
so time and memory are measured in separate passes.

Example:
    result = run_benchmark(lambda: ''.join(parts), n=10_000)
    records.add(MeasurementRecord('join', result))
"""

import gc
import time
import tracemalloc
from typing import Callable

from .logger import get_input_logger
from ..output.report_models import Result


logger = get_input_logger('measurement')


def time_calls(func: Callable[[], object], n: int) -> int:
    """Return the nanoseconds taken by n calls of func."""
    start = time.perf_counter_ns()
    for _ in range(n):
        func()
    return time.perf_counter_ns() - start


def trace_allocations(func: Callable[[], object], n: int) -> tuple[int, int]:
    """
    Return (bytes, blocks) allocated by n calls of func.

    Only growth is counted; memory released during the run is not
    subtracted.
    """
    was_tracing = tracemalloc.is_tracing()
    if not was_tracing:
        tracemalloc.start()
    try:
        before = tracemalloc.take_snapshot()
        for _ in range(n):
            func()
        after = tracemalloc.take_snapshot()
    finally:
        if not was_tracing:
            tracemalloc.stop()

    total_bytes = 0
    total_blocks = 0
    for stat in after.compare_to(before, 'lineno'):
        if stat.size_diff > 0:
            total_bytes += stat.size_diff
        if stat.count_diff > 0:
            total_blocks += stat.count_diff
    return total_bytes, total_blocks


def run_benchmark(func: Callable[[], object], n: int, trace_memory: bool = True) -> Result:
    """
    Run func n times and return the per-operation Result.

    Args:
        func: Zero-argument callable to measure
        n: Number of calls (>= 1)
        trace_memory: Also measure allocations in a second pass

    Raises:
        ValueError: If n is less than 1
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    gc.collect()
    elapsed = time_calls(func, n)
    total_bytes, total_blocks = trace_allocations(func, n) if trace_memory else (0, 0)

    logger.debug(f"Measured {n} calls of {getattr(func, '__name__', func)}: {elapsed} ns")
    return Result.from_totals(n, elapsed, total_bytes, total_blocks)


__all__ = ['run_benchmark', 'time_calls', 'trace_allocations']
