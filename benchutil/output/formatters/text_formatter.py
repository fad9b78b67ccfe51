# Path: benchutil/output/formatters/text_formatter.py
"""
Text Formatter

Renders records as a whitespace-aligned table for consoles and
plain-text files.

Layout:
    Header line, a line of dashes as wide as every column plus its
    padding, then one line per record. Text columns are left-justified
    and padded to width + padding; numeric columns are right-justified
    to their width and followed by the padding. The note column, when
    present, comes last and is written as is.

Sections:
    A group boundary writes a blank line, then the header and dashes
    again when section headers are on.
"""

from typing import Optional, Sequence

from ...constants import SEPARATOR_CHAR, ColumnKey
from ..layout import LayoutPlan, cell_text
from ..report_models import MeasurementRecord, RecordSet, ReportConfiguration
from ..sections import walk_records
from .base_formatter import BaseFormatter, SinkWriter, SystemInfoProvider


class TextFormatter(BaseFormatter):
    """Renders report as aligned text."""

    @property
    def format_name(self) -> str:
        return 'text'

    @property
    def file_extension(self) -> str:
        return '.txt'

    def _render_body(
        self,
        records: Sequence[MeasurementRecord],
        plan: LayoutPlan,
        out: SinkWriter,
    ) -> None:
        if isinstance(records, RecordSet):
            if records.name:
                out.line(records.name)
            if records.description:
                out.line(records.description)

        header = self.header_line(plan)
        separator = SEPARATOR_CHAR * plan.line_width

        out.line(header)
        out.line(separator)
        for boundary, record in walk_records(records, plan.section_per_group):
            if boundary is not None:
                out.line()
                if plan.section_headers:
                    out.line(header)
                    out.line(separator)
            out.line(self.record_line(record, plan))

        if isinstance(records, RecordSet) and records.note:
            out.line(records.note)

    def header_line(self, plan: LayoutPlan) -> str:
        """Build the header line from the configured labels."""
        return self._compose([col.header for col in plan.columns], plan)

    def record_line(self, record: MeasurementRecord, plan: LayoutPlan) -> str:
        """Build one record's line."""
        cells = [cell_text(record, col.key, plan.descriptors) for col in plan.columns]
        return self._compose(cells, plan)

    def _compose(self, cells: list[str], plan: LayoutPlan) -> str:
        padding = ' ' * plan.padding
        parts = []
        for col, cell in zip(plan.columns, cells):
            if col.key is ColumnKey.NOTE:
                parts.append(cell)
            elif col.numeric:
                parts.append(cell.rjust(col.width) + padding)
            else:
                parts.append(cell.ljust(col.width + plan.padding))
        return ''.join(parts)


def render_text(
    records: Sequence[MeasurementRecord],
    config: Optional[ReportConfiguration],
    sink,
    system_info_provider: Optional[SystemInfoProvider] = None,
) -> None:
    """Render records as aligned text to sink."""
    TextFormatter(system_info_provider).render(records, config, sink)


__all__ = ['TextFormatter', 'render_text']
