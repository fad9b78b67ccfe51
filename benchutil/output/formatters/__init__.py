# Path: benchutil/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders a record set into a specific output format.
Formatters share the LayoutPlan and the group partitioner; they only
differ in how rows and section boundaries are drawn.
"""

from .base_formatter import BaseFormatter, FormatterRegistry, SinkWriter
from .text_formatter import TextFormatter, render_text
from .csv_formatter import CsvFormatter, render_csv
from .markdown_formatter import MarkdownFormatter, render_markdown
from .csv2md import csv_to_markdown

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'SinkWriter',
    'TextFormatter',
    'CsvFormatter',
    'MarkdownFormatter',
    'render_text',
    'render_csv',
    'render_markdown',
    'csv_to_markdown',
]
