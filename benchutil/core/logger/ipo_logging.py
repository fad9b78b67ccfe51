# Path: benchutil/core/logger/ipo_logging.py
"""
IPO-Aware Logging for benchutil

Input-Process-Output separated logging for the report engine.

Loggers are named by layer so a single handler setup can split them:
- INPUT layer (record sets, system-info probes, measurement)
- PROCESS layer (width calculation, group partitioning)
- OUTPUT layer (text/CSV/Markdown renderers, report generator)

Library modules only ask for loggers; setup_ipo_logging() is called by
applications such as the CLI.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_ROOT = 'benchutil'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.prefix = f'{LOGGER_ROOT}.{layer}'

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.prefix)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'WARNING',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for benchutil.

    When log_dir is given, creates:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Console output goes to stderr; stdout carries the reports.

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/tmp/benchutil/logs'),
            log_level='INFO',
            console_output=True
        )
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    package_logger = logging.getLogger(LOGGER_ROOT)
    package_logger.setLevel(level)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        package_logger.addHandler(full_handler)

        for layer in ('input', 'process', 'output'):
            handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(layer))
            package_logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_formatter = logging.Formatter(
            '[%(levelname)s] %(name)s - %(message)s'
        )
        console_handler.setFormatter(console_formatter)
        package_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'system_info', 'measurement')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'{LOGGER_ROOT}.input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'layout', 'group_partitioner')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'{LOGGER_ROOT}.process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'text_formatter', 'report_generator')

    Returns:
        Logger configured for OUTPUT layer

    Example:
        logger = get_output_logger('report_generator')
        logger.info("Rendering markdown report")
    """
    return logging.getLogger(f'{LOGGER_ROOT}.output.{name}')


__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
