# Path: benchutil/output/formatters/csv_formatter.py
"""
CSV Formatter

Renders records as CSV for spreadsheet import. One header row names
the participating columns with the fixed CSV header names, then one
row per record. Cells are bare numbers; unit descriptors, padding,
and system information never appear in CSV output.

A group boundary writes an all-blank row, followed by the header row
again when section headers are on.
"""

import csv
from typing import Optional, Sequence

from ..layout import ColumnSpec, LayoutPlan, row_cells
from ..report_models import MeasurementRecord, ReportConfiguration
from ..sections import walk_records
from .base_formatter import BaseFormatter, SinkWriter, SystemInfoProvider


def csv_header_row(columns: Sequence[ColumnSpec]) -> list[str]:
    """Return the fixed CSV header names for columns."""
    return [col.csv_header for col in columns]


def csv_record_row(record: MeasurementRecord, columns: Sequence[ColumnSpec]) -> list[str]:
    """Return a record's CSV fields; numbers are never suffixed."""
    return row_cells(record, columns, descriptors=False)


class CsvFormatter(BaseFormatter):
    """Renders report as CSV."""

    supports_system_info = False

    @property
    def format_name(self) -> str:
        return 'csv'

    @property
    def file_extension(self) -> str:
        return '.csv'

    def _render_body(
        self,
        records: Sequence[MeasurementRecord],
        plan: LayoutPlan,
        out: SinkWriter,
    ) -> None:
        writer = csv.writer(out)
        header = csv_header_row(plan.columns)
        blank = [''] * len(plan.columns)

        writer.writerow(header)
        for boundary, record in walk_records(records, plan.section_per_group):
            if boundary is not None:
                writer.writerow(blank)
                if plan.section_headers:
                    writer.writerow(header)
            writer.writerow(csv_record_row(record, plan.columns))


def render_csv(
    records: Sequence[MeasurementRecord],
    config: Optional[ReportConfiguration],
    sink,
    system_info_provider: Optional[SystemInfoProvider] = None,
) -> None:
    """Render records as CSV to sink."""
    CsvFormatter(system_info_provider).render(records, config, sink)


__all__ = ['CsvFormatter', 'render_csv', 'csv_header_row', 'csv_record_row']
