# Path: benchutil/core/logger/__init__.py
"""
benchutil Logger Package

IPO-aware logging for the report engine.

Provides separate log streams for:
- INPUT layer (record collection, system probes, measurement)
- PROCESS layer (column widths, group partitioning)
- OUTPUT layer (renderers, report generator)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
