# Path: benchutil/core/system_info.py
"""
System Information

Describes the machine a report was produced on. The text is prepended
verbatim to text and Markdown reports when requested; the renderers do
not parse it.

Basic:    processor model, logical CPUs, total memory, OS
Detailed: adds clock speed, cache size, physical cores, kernel
          version and architecture

Example:
    print(get_system_info(detailed=True))
"""

import platform
from typing import Optional

import psutil

from .logger import get_input_logger
from ..errors import SystemInfoError


logger = get_input_logger('system_info')

CPUINFO_PATH = '/proc/cpuinfo'
LABEL_WIDTH = 16


def _cpuinfo_field(field_name: str) -> Optional[str]:
    """Return the first value of a /proc/cpuinfo field, or None."""
    try:
        with open(CPUINFO_PATH, encoding='utf-8') as fh:
            for line in fh:
                if line.startswith(field_name):
                    return line.split(':', 1)[1].strip()
    except (FileNotFoundError, PermissionError):
        pass
    return None


def cpu_model() -> str:
    """Return a human-readable CPU model string."""
    return _cpuinfo_field('model name') or platform.processor() or 'unknown'


def cache_size() -> str:
    """Return the CPU cache size as reported by the kernel."""
    return _cpuinfo_field('cache size') or 'unknown'


def clock_speed() -> str:
    """Return the current CPU clock speed in MHz."""
    try:
        freq = psutil.cpu_freq()
    except NotImplementedError:
        return 'unknown'
    if freq is None:
        return 'unknown'
    return f"{freq.current:.0f} MHz"


def _memory_mb(total_bytes: int) -> str:
    return f"{total_bytes / (1024 * 1024):.0f} MB"


def _format_lines(rows: list[tuple[str, str]]) -> str:
    return '\n'.join(f"{label + ':':<{LABEL_WIDTH}}{value}" for label, value in rows) + '\n'


def get_system_info(detailed: bool = False) -> str:
    """
    Build the system description.

    Args:
        detailed: Include clock, cache, core and kernel details

    Returns:
        Multi-line text ending with a newline

    Raises:
        SystemInfoError: If a platform probe fails
    """
    try:
        memory = psutil.virtual_memory()
        rows = [
            ('Processor', cpu_model()),
            ('CPUs', str(psutil.cpu_count(logical=True) or 1)),
        ]
        if detailed:
            rows.extend([
                ('Physical cores', str(psutil.cpu_count(logical=False) or 'unknown')),
                ('Clock speed', clock_speed()),
                ('Cache size', cache_size()),
            ])
        rows.append(('Memory', _memory_mb(memory.total)))
        rows.append(('OS', f"{platform.system()} {platform.release()}"))
        if detailed:
            rows.extend([
                ('Kernel', platform.version()),
                ('Architecture', platform.machine()),
            ])
    except (OSError, psutil.Error) as e:
        logger.error(f"System probe failed: {e}")
        raise SystemInfoError(f"system information unavailable: {e}") from e

    logger.debug(f"Collected {'detailed' if detailed else 'basic'} system info")
    return _format_lines(rows)


__all__ = ['get_system_info', 'cpu_model', 'cache_size', 'clock_speed']
