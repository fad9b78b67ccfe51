#!/usr/bin/env python3
# Path: benchutil/main.py
"""
benchutil - Demo Entry Point

Runs a small set of string-building benchmarks and renders the
results with the report engine. Useful for trying layout options
against real measurements.

Usage:
    python -m benchutil                         # aligned text on stdout
    python -m benchutil --format md --section-per-group --section-headers
    python -m benchutil --format csv --output results.csv
    python -m benchutil --descriptors --detailed-system-info

Defaults for every layout option come from BENCHUTIL_* environment
variables (or a .env file); command-line flags override them.
"""

import argparse
import io
import random
import sys
from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .core.logger import setup_ipo_logging, get_input_logger
from .core.measurement import run_benchmark
from .core.progress import DotProgress
from .core.random_data import rand_bytes, rand_string, seed_value
from .errors import ReportError
from .output import MeasurementRecord, RecordSet, ReportConfiguration, ReportGenerator

DEFAULT_OPERATIONS = 2000
PART_COUNT = 64
PART_LENGTH = 16


def build_demo_records(
    operations: int = DEFAULT_OPERATIONS,
    iterations: int = 1,
    seed: Optional[int] = None,
) -> RecordSet:
    """
    Measure the built-in benchmarks.

    Args:
        operations: Calls per benchmark
        iterations: Iteration count stored on each record
        seed: Seed for the input data (random when None)

    Returns:
        RecordSet in presentation order
    """
    rng = random.Random(seed if seed is not None else seed_value())
    parts = [rand_string(PART_LENGTH, rng) for _ in range(PART_COUNT)]
    chunks = [rand_bytes(PART_LENGTH, rng) for _ in range(PART_COUNT)]

    def plus_concat():
        s = ''
        for p in parts:
            s += p
        return s

    def str_join():
        return ''.join(parts)

    def string_io():
        buf = io.StringIO()
        for p in parts:
            buf.write(p)
        return buf.getvalue()

    def bytes_join():
        return b''.join(chunks)

    def bytearray_extend():
        buf = bytearray()
        for c in chunks:
            buf.extend(c)
        return bytes(buf)

    benches = [
        ('str', '+=', plus_concat, 'repeated += on str', ''),
        ('str', 'join', str_join, 'str.join', ''),
        ('str', 'StringIO', string_io, 'io.StringIO writes', ''),
        ('bytes', 'join', bytes_join, 'bytes.join', ''),
        ('bytes', 'bytearray', bytearray_extend, 'bytearray.extend', 'copies once at the end'),
    ]

    records = RecordSet(
        name='String building',
        description=f"{PART_COUNT} parts of {PART_LENGTH} characters",
    )
    for group, name, func, desc, note in benches:
        result = run_benchmark(func, operations)
        records.add(MeasurementRecord(
            name=name,
            result=result,
            group=group,
            subgroup=f"{PART_COUNT}x{PART_LENGTH}",
            description=desc,
            note=note,
            iterations=iterations,
        ))
    return records


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description='benchutil - render benchmark results as text, CSV or Markdown',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m benchutil --format markdown --section-per-group --name-sections
  python -m benchutil --format csv --output results.csv
        """
    )
    parser.add_argument('--format', '-f', help='text, csv or markdown (md)')
    parser.add_argument('--output', '-o', type=Path, help='Write to this file instead of stdout')
    parser.add_argument('--operations', '-n', type=int, default=DEFAULT_OPERATIONS,
                        help='Calls per benchmark')
    parser.add_argument('--iterations', type=int, default=1,
                        help='Iteration count stored on each record')
    parser.add_argument('--seed', type=int, help='Seed for benchmark input data')
    parser.add_argument('--padding', type=int, help='Spaces between text columns')

    flags = [
        ('--descriptors', 'include_ops_descriptors', 'Append unit suffixes to numbers'),
        ('--system-info', 'include_system_info', 'Prepend system information'),
        ('--detailed-system-info', 'include_detailed_system_info',
         'Prepend detailed system information'),
        ('--section-per-group', 'section_per_group', 'Start a section when the group changes'),
        ('--section-headers', 'section_headers', 'Repeat headers / new table per section'),
        ('--name-sections', 'name_sections', 'Use the group as section title (Markdown)'),
    ]
    for flag, dest, help_text in flags:
        parser.add_argument(flag, dest=dest, action=argparse.BooleanOptionalAction, default=None,
                            help=help_text)

    parser.add_argument('--progress', action='store_true',
                        help='Print progress dots to stderr while measuring')
    return parser


def resolve_report_config(args: argparse.Namespace, config: ConfigLoader) -> ReportConfiguration:
    """Merge environment defaults with command-line overrides."""
    report_config = ReportConfiguration.from_loader(config)
    overrides = {}
    if args.padding is not None:
        overrides['column_padding'] = args.padding
    for dest in (
        'include_ops_descriptors',
        'include_system_info',
        'include_detailed_system_info',
        'section_per_group',
        'section_headers',
        'name_sections',
    ):
        value = getattr(args, dest)
        if value is not None:
            overrides[dest] = value
    return report_config.with_options(**overrides)


def initialize_system() -> ConfigLoader:
    """
    Load configuration and set up logging.

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level='DEBUG' if config.get('debug') else config.get('log_level', 'WARNING'),
        console_output=config.get('log_console', True),
    )
    return config


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for benchutil.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    try:
        config = initialize_system()
        logger = get_input_logger('main')
        report_config = resolve_report_config(args, config)
        format_name = args.format or config.get('output_format', 'text')

        if args.progress:
            with DotProgress():
                records = build_demo_records(args.operations, args.iterations, args.seed)
            print(file=sys.stderr)
        else:
            records = build_demo_records(args.operations, args.iterations, args.seed)
        logger.info(f"Measured {len(records)} benchmarks")

        generator = ReportGenerator(config)
        if args.output:
            with open(args.output, 'w', encoding='utf-8', newline='') as fh:
                generator.render(records, report_config, format_name, fh)
        else:
            generator.render(records, report_config, format_name, sys.stdout)
        return 0

    except (ReportError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
