# Path: benchutil/output/layout.py
"""
Column Layout

Derives the column width set for one render call and freezes it,
together with the resolved section options, into a LayoutPlan.
Every renderer formats cells through the helpers here, so width and
value rules exist once for all formats.

Width rules:
    - Textual columns take the length of their longest value; a textual
      column that is empty for every record gets width 0 and is left out.
    - Numeric columns take the length of their widest formatted number
      (operations multiplied by iterations, per-op values divided by it).
      They are always present.
    - With descriptors on, the per-op columns reserve the suffix length.
    - Every participating column is at least as wide as its header.
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from ..constants import (
    ALIGN_LEFT,
    ALIGN_RIGHT,
    COLUMN_ORDER,
    CSV_HEADERS,
    DESCRIPTOR_SUFFIXES,
    DESCRIPTOR_WIDTH_BUMP,
    NUMERIC_COLUMNS,
    TEXT_COLUMNS,
    ColumnKey,
)
from ..core.logger import get_process_logger
from ..errors import EmptyInputError
from .report_models import MeasurementRecord, ReportConfiguration


logger = get_process_logger('layout')


# ==============================================================================
# CELL VALUES
# ==============================================================================

_RESULT_FIELDS: Dict[ColumnKey, str] = {
    ColumnKey.NS_PER_OP: 'nanos_per_op',
    ColumnKey.BYTES_PER_OP: 'bytes_per_op',
    ColumnKey.ALLOCS_PER_OP: 'allocs_per_op',
}


def numeric_value(record: MeasurementRecord, key: ColumnKey) -> int:
    """
    Return the displayed number for a numeric column.

    Operations are expanded by the record's iterations. Per-op values
    are divided by iterations, except an exact zero which stays zero.
    """
    if key is ColumnKey.OPERATIONS:
        return record.result.operations * record.iterations
    value = getattr(record.result, _RESULT_FIELDS[key])
    if value == 0:
        return 0
    return value // record.iterations


def cell_text(
    record: MeasurementRecord,
    key: ColumnKey,
    descriptors: bool = False,
) -> str:
    """Format one cell; numeric cells get a unit suffix when descriptors is set."""
    if key in TEXT_COLUMNS:
        return record.text_value(key)
    text = str(numeric_value(record, key))
    if descriptors:
        text += DESCRIPTOR_SUFFIXES[key]
    return text


# ==============================================================================
# WIDTH CALCULATION
# ==============================================================================

def data_widths(
    records: Sequence[MeasurementRecord],
    config: ReportConfiguration,
) -> Dict[ColumnKey, int]:
    """
    Compute data-driven widths, before header reconciliation.

    Returns:
        Width per column; 0 marks a textual column with no values
    """
    widths = {key: 0 for key in COLUMN_ORDER}
    for record in records:
        for key in TEXT_COLUMNS:
            widths[key] = max(widths[key], len(record.text_value(key)))
        for key in NUMERIC_COLUMNS:
            widths[key] = max(widths[key], len(str(numeric_value(record, key))))

    if config.include_ops_descriptors:
        for key in NUMERIC_COLUMNS:
            widths[key] += DESCRIPTOR_WIDTH_BUMP[key]
    return widths


def column_widths(
    records: Sequence[MeasurementRecord],
    config: ReportConfiguration,
) -> Dict[ColumnKey, int]:
    """
    Compute the final width of every column.

    Args:
        records: Records in presentation order
        config: Active configuration

    Returns:
        Width per column in COLUMN_ORDER; excluded columns map to 0
    """
    widths = data_widths(records, config)
    for key in COLUMN_ORDER:
        if widths[key] == 0 and key in TEXT_COLUMNS:
            continue
        widths[key] = max(widths[key], len(config.headers.label(key)))
    return widths


# ==============================================================================
# LAYOUT PLAN
# ==============================================================================

@dataclass(frozen=True)
class ColumnSpec:
    """A participating column and how to draw it."""
    key: ColumnKey
    header: str
    csv_header: str
    width: int

    @property
    def numeric(self) -> bool:
        return self.key not in TEXT_COLUMNS

    @property
    def alignment(self) -> str:
        return ALIGN_RIGHT if self.numeric else ALIGN_LEFT


@dataclass(frozen=True)
class LayoutPlan:
    """
    Immutable layout for one render call.

    Attributes:
        columns: Participating columns in presentation order
        padding: Spaces after each text column
        descriptors: Whether numeric cells carry unit suffixes
        section_per_group: Group changes start a new section
        section_headers: Sections repeat headers / become own tables
        sections_named: Group ids become section titles (Markdown)
    """
    columns: Tuple[ColumnSpec, ...]
    padding: int
    descriptors: bool
    section_per_group: bool
    section_headers: bool
    sections_named: bool

    def has_column(self, key: ColumnKey) -> bool:
        return any(col.key is key for col in self.columns)

    def width(self, key: ColumnKey) -> int:
        for col in self.columns:
            if col.key is key:
                return col.width
        return 0

    @property
    def line_width(self) -> int:
        """Sum of every participating column's width plus padding."""
        return sum(col.width + self.padding for col in self.columns)

    @property
    def table_columns(self) -> Tuple[ColumnSpec, ...]:
        """Columns of a Markdown table; the group column drops out when it names sections."""
        if self.sections_named:
            return tuple(c for c in self.columns if c.key is not ColumnKey.GROUP)
        return self.columns


def build_layout(
    records: Sequence[MeasurementRecord],
    config: ReportConfiguration,
) -> LayoutPlan:
    """
    Build the LayoutPlan for a record set.

    Args:
        records: Records in presentation order
        config: Active configuration

    Returns:
        Frozen LayoutPlan

    Raises:
        EmptyInputError: If records is empty
    """
    if len(records) == 0:
        raise EmptyInputError('layout')

    widths = column_widths(records, config)
    columns = tuple(
        ColumnSpec(
            key=key,
            header=config.headers.label(key),
            csv_header=CSV_HEADERS[key],
            width=widths[key],
        )
        for key in COLUMN_ORDER
        if widths[key] > 0
    )

    plan = LayoutPlan(
        columns=columns,
        padding=config.column_padding,
        descriptors=config.include_ops_descriptors,
        section_per_group=config.section_per_group,
        section_headers=config.section_headers,
        sections_named=config.sections_named,
    )
    logger.debug(
        f"Layout for {len(records)} records: "
        + ', '.join(f"{c.key.value}={c.width}" for c in columns)
    )
    return plan


def row_cells(
    record: MeasurementRecord,
    columns: Sequence[ColumnSpec],
    descriptors: bool = False,
) -> list[str]:
    """Return the cell strings of a record for the given columns."""
    return [cell_text(record, col.key, descriptors) for col in columns]


__all__ = [
    'numeric_value',
    'cell_text',
    'data_widths',
    'column_widths',
    'ColumnSpec',
    'LayoutPlan',
    'build_layout',
    'row_cells',
]
