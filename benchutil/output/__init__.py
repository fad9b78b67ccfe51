# Path: benchutil/output/__init__.py
"""
Output Module for benchutil

Renders benchmark record sets as aligned text, CSV, or Markdown.

Architecture:
    RecordSet / ReportConfiguration  - data model (report_models)
    build_layout -> LayoutPlan       - column widths and participation
    walk_records                     - group boundaries (sections)
    FormatterRegistry                - text, csv, markdown formatters
    ReportGenerator                  - render by format name

Render flow:
    records + config -> LayoutPlan -> [Formatter + group boundaries] -> sink

Usage:
    from benchutil.output import RecordSet, ReportConfiguration, render_text

    render_text(records, ReportConfiguration(section_per_group=True), sys.stdout)
"""

from .report_models import (
    Result,
    MeasurementRecord,
    RecordSet,
    ColumnHeaders,
    ReportConfiguration,
)
from .layout import ColumnSpec, LayoutPlan, build_layout, column_widths
from .sections import GroupBoundary, walk_records, find_boundaries, count_boundaries
from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    TextFormatter,
    CsvFormatter,
    MarkdownFormatter,
    render_text,
    render_csv,
    render_markdown,
    csv_to_markdown,
)
from .report_generator import ReportGenerator


__all__ = [
    # Report models
    'Result',
    'MeasurementRecord',
    'RecordSet',
    'ColumnHeaders',
    'ReportConfiguration',
    # Layout
    'ColumnSpec',
    'LayoutPlan',
    'build_layout',
    'column_widths',
    # Sections
    'GroupBoundary',
    'walk_records',
    'find_boundaries',
    'count_boundaries',
    # Formatters
    'BaseFormatter',
    'FormatterRegistry',
    'TextFormatter',
    'CsvFormatter',
    'MarkdownFormatter',
    'render_text',
    'render_csv',
    'render_markdown',
    'csv_to_markdown',
    # Generator
    'ReportGenerator',
]
