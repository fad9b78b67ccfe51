# Path: benchutil/core/progress.py
"""
Progress Dots

Prints a '.' every interval while long benchmarks run, and a newline
after every 60 dots, until told to stop.

Example:
    with DotProgress():
        run_slow_benchmarks()
"""

import sys
import threading
from typing import Optional, TextIO

DOTS_PER_LINE = 60


def dot(
    done: threading.Event,
    stream: Optional[TextIO] = None,
    interval: float = 1.0,
) -> int:
    """
    Write dots to stream until done is set.

    Returns:
        Number of dots written
    """
    stream = stream or sys.stderr
    count = 0
    while not done.wait(interval):
        count += 1
        stream.write('.')
        if count % DOTS_PER_LINE == 0:
            stream.write('\n')
        stream.flush()
    return count


class DotProgress:
    """Context manager running dot() on a daemon thread."""

    def __init__(self, stream: Optional[TextIO] = None, interval: float = 1.0):
        self.stream = stream
        self.interval = interval
        self._done = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __enter__(self) -> 'DotProgress':
        self._thread = threading.Thread(
            target=dot,
            args=(self._done, self.stream, self.interval),
            daemon=True,
        )
        self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._done.set()
        if self._thread is not None:
            self._thread.join()


__all__ = ['dot', 'DotProgress', 'DOTS_PER_LINE']
