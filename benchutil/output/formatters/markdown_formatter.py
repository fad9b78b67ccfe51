# Path: benchutil/output/formatters/markdown_formatter.py
"""
Markdown Formatter

Renders records as Markdown pipe tables in two stages:

    records -> CSV buffer (same fields as the CSV formatter)
            -> csv_to_markdown() with headers and alignments supplied
               out of band -> sink

Text columns are left-aligned, numeric columns right-aligned.

Sections (with section_per_group):
    section_headers off: one table; a blank row marks each boundary,
        carrying the group id in its first cell when sections are named.
    section_headers on: each section is its own table; the buffer is
        flushed, a blank line written, and an optional '### <group>'
        title opens the next table. Sections with an empty group id
        get no title.

When sections are named the group column is left out of the tables.
"""

import csv
import io
from typing import Optional, Sequence

from ...constants import MARKDOWN_SECTION_HEADING
from ...core.logger import get_output_logger
from ..layout import LayoutPlan
from ..report_models import MeasurementRecord, ReportConfiguration
from ..sections import walk_records
from .base_formatter import BaseFormatter, SinkWriter, SystemInfoProvider
from .csv2md import csv_to_markdown
from .csv_formatter import csv_record_row


logger = get_output_logger('markdown_formatter')


class _TableBuffer:
    """CSV rows of the table being built."""

    def __init__(self):
        self.buffer = io.StringIO()
        self.writer = csv.writer(self.buffer)

    def add(self, row: list[str]) -> None:
        self.writer.writerow(row)

    def getvalue(self) -> str:
        return self.buffer.getvalue()


class MarkdownFormatter(BaseFormatter):
    """Renders report as Markdown tables."""

    @property
    def format_name(self) -> str:
        return 'markdown'

    @property
    def file_extension(self) -> str:
        return '.md'

    def _render_body(
        self,
        records: Sequence[MeasurementRecord],
        plan: LayoutPlan,
        out: SinkWriter,
    ) -> None:
        columns = plan.table_columns
        headers = [col.header for col in columns]
        alignments = [col.alignment for col in columns]
        blank = [''] * len(columns)

        table = _TableBuffer()
        tables = 1
        for position, (boundary, record) in enumerate(
            walk_records(records, plan.section_per_group)
        ):
            if position == 0 and plan.sections_named and record.group:
                if plan.section_headers:
                    self._title(record.group, out)
                else:
                    table.add(self._label_row(record.group, blank))

            if boundary is not None:
                if plan.section_headers:
                    self._flush(table, headers, alignments, out)
                    out.line()
                    if plan.sections_named:
                        self._title(boundary.group, out)
                    table = _TableBuffer()
                    tables += 1
                elif plan.sections_named:
                    table.add(self._label_row(boundary.group, blank))
                else:
                    table.add(blank)

            table.add(csv_record_row(record, columns))

        self._flush(table, headers, alignments, out)
        logger.debug(f"Wrote {tables} markdown table(s)")

    def _title(self, group: str, out: SinkWriter) -> None:
        """Write a section title; ungrouped sections get none."""
        if group:
            out.line(MARKDOWN_SECTION_HEADING + group)

    def _label_row(self, group: str, blank: list[str]) -> list[str]:
        row = list(blank)
        row[0] = group
        return row

    def _flush(
        self,
        table: _TableBuffer,
        headers: list[str],
        alignments: list[str],
        out: SinkWriter,
    ) -> None:
        """Run the buffered CSV through the transform and write the table."""
        out.write(csv_to_markdown(
            table.getvalue(), alignments, headers=headers, has_header=False,
        ))


def render_markdown(
    records: Sequence[MeasurementRecord],
    config: Optional[ReportConfiguration],
    sink,
    system_info_provider: Optional[SystemInfoProvider] = None,
) -> None:
    """Render records as Markdown to sink."""
    MarkdownFormatter(system_info_provider).render(records, config, sink)


__all__ = ['MarkdownFormatter', 'render_markdown']
