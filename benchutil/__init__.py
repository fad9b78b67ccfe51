# Path: benchutil/__init__.py
"""
benchutil - tabular benchmark reports

Renders labeled benchmark measurements as aligned text, CSV, or
Markdown tables, with optional sections per group.

Usage:
    import sys
    from benchutil import MeasurementRecord, RecordSet, Result, render_markdown

    records = RecordSet()
    records.add(MeasurementRecord('join', Result(1000, 120, 64, 1), group='strings'))
    render_markdown(records, None, sys.stdout)
"""

__version__ = '0.1.0'

from .errors import (
    ReportError,
    EmptyInputError,
    SinkWriteError,
    CollaboratorError,
    MarkdownTransformError,
    SystemInfoError,
)
from .output import (
    Result,
    MeasurementRecord,
    RecordSet,
    ColumnHeaders,
    ReportConfiguration,
    LayoutPlan,
    build_layout,
    walk_records,
    render_text,
    render_csv,
    render_markdown,
    csv_to_markdown,
    ReportGenerator,
)

__all__ = [
    '__version__',
    # Errors
    'ReportError',
    'EmptyInputError',
    'SinkWriteError',
    'CollaboratorError',
    'MarkdownTransformError',
    'SystemInfoError',
    # Models
    'Result',
    'MeasurementRecord',
    'RecordSet',
    'ColumnHeaders',
    'ReportConfiguration',
    # Engine
    'LayoutPlan',
    'build_layout',
    'walk_records',
    'render_text',
    'render_csv',
    'render_markdown',
    'csv_to_markdown',
    'ReportGenerator',
]
