# Path: benchutil/output/report_models.py
"""
Report Data Models

Format-agnostic data structures for benchmark reports.
Callers build a RecordSet; renderers consume it together with a
ReportConfiguration.

Design: records are plain values in presentation order. Nothing here
sorts, deduplicates or computes layout; column widths and section
boundaries are derived per render call by layout.py and sections/.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional

from ..constants import CSV_HEADERS, ColumnKey, DEFAULT_COLUMN_PADDING
from ..core.logger import get_input_logger


logger = get_input_logger('record_set')


@dataclass(frozen=True)
class Result:
    """
    Fixed-shape numeric result of one benchmark.

    All four values are independent; none is derived from another.

    Attributes:
        operations: Number of operations performed per iteration
        nanos_per_op: Nanoseconds per operation
        bytes_per_op: Bytes allocated per operation
        allocs_per_op: Allocations per operation
    """
    operations: int
    nanos_per_op: int
    bytes_per_op: int
    allocs_per_op: int

    @classmethod
    def from_totals(
        cls,
        n: int,
        elapsed_ns: int,
        total_bytes: int = 0,
        total_allocs: int = 0,
    ) -> 'Result':
        """
        Normalize harness totals into per-operation values.

        Args:
            n: Number of operations the harness ran
            elapsed_ns: Total elapsed nanoseconds
            total_bytes: Total bytes allocated
            total_allocs: Total allocations

        Returns:
            Result with per-op values truncated to integers

        Raises:
            ValueError: If n is less than 1
        """
        if n < 1:
            raise ValueError(f"operation count must be >= 1, got {n}")
        return cls(
            operations=n,
            nanos_per_op=elapsed_ns // n,
            bytes_per_op=total_bytes // n,
            allocs_per_op=total_allocs // n,
        )


@dataclass(frozen=True)
class MeasurementRecord:
    """
    One named measurement and its result.

    Attributes:
        name: Benchmark name
        result: Numeric result
        group: Section label; empty means ungrouped
        subgroup: Secondary label, shown as its own column only
        description: Free text
        note: Free text, rendered last
        iterations: Divisor/multiplier applied when expanding the result
    """
    name: str
    result: Result
    group: str = ''
    subgroup: str = ''
    description: str = ''
    note: str = ''
    iterations: int = 1

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(
                f"iterations must be >= 1, got {self.iterations} for {self.name!r}"
            )

    def text_value(self, key: ColumnKey) -> str:
        """Return the string held for a textual column."""
        return getattr(self, key.value)


class RecordSet:
    """
    Ordered collection of MeasurementRecords.

    Records are kept in insertion order; nothing is sorted or
    deduplicated. The optional set-level name, description and note
    are printed around the table by the text renderer.

    Example:
        records = RecordSet(name='string building')
        records.add(MeasurementRecord('join', Result(1000, 120, 64, 1)))
    """

    def __init__(
        self,
        records: Optional[Iterable[MeasurementRecord]] = None,
        name: str = '',
        description: str = '',
        note: str = '',
    ):
        self.name = name
        self.description = description
        self.note = note
        self._records: List[MeasurementRecord] = list(records or [])

    def add(self, *records: MeasurementRecord) -> None:
        """Append one or more records, preserving order."""
        self._records.extend(records)
        logger.debug(f"Added {len(records)} record(s); set size {len(self._records)}")

    def __iter__(self) -> Iterator[MeasurementRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __repr__(self) -> str:
        return f"RecordSet(name={self.name!r}, records={len(self._records)})"


@dataclass(frozen=True)
class ColumnHeaders:
    """Header labels used by the text and Markdown renderers."""
    group: str = CSV_HEADERS[ColumnKey.GROUP]
    subgroup: str = CSV_HEADERS[ColumnKey.SUBGROUP]
    name: str = CSV_HEADERS[ColumnKey.NAME]
    description: str = CSV_HEADERS[ColumnKey.DESCRIPTION]
    operations: str = CSV_HEADERS[ColumnKey.OPERATIONS]
    ns_per_op: str = CSV_HEADERS[ColumnKey.NS_PER_OP]
    bytes_per_op: str = CSV_HEADERS[ColumnKey.BYTES_PER_OP]
    allocs_per_op: str = CSV_HEADERS[ColumnKey.ALLOCS_PER_OP]
    note: str = CSV_HEADERS[ColumnKey.NOTE]

    def label(self, key: ColumnKey) -> str:
        """Return the header text for a column."""
        return getattr(self, key.value)


@dataclass(frozen=True)
class ReportConfiguration:
    """
    Options controlling how a record set is rendered.

    Attributes:
        headers: Column header text (text and Markdown)
        column_padding: Spaces between text columns
        include_ops_descriptors: Append unit suffixes to numeric cells
        include_system_info: Prepend basic system information
        include_detailed_system_info: Prepend detailed system information
        section_per_group: Start a new section when the group changes
        section_headers: Repeat headers / start a new table per section
        name_sections: Print the group as a section title (Markdown)
        group_as_section_name: Alias of name_sections
    """
    headers: ColumnHeaders = field(default_factory=ColumnHeaders)
    column_padding: int = DEFAULT_COLUMN_PADDING
    include_ops_descriptors: bool = False
    include_system_info: bool = False
    include_detailed_system_info: bool = False
    section_per_group: bool = False
    section_headers: bool = True
    name_sections: bool = False
    group_as_section_name: bool = False

    def __post_init__(self):
        if self.column_padding < 0:
            raise ValueError(
                f"column_padding must be >= 0, got {self.column_padding}"
            )

    @property
    def wants_system_info(self) -> bool:
        """True when either system info flag is set."""
        return self.include_system_info or self.include_detailed_system_info

    @property
    def sections_named(self) -> bool:
        """True when groups become section titles; needs section_per_group."""
        return self.section_per_group and (
            self.name_sections or self.group_as_section_name
        )

    def with_options(self, **changes) -> 'ReportConfiguration':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_loader(cls, loader) -> 'ReportConfiguration':
        """
        Build a configuration from ConfigLoader defaults.

        Args:
            loader: ConfigLoader (or anything with a compatible get())

        Returns:
            ReportConfiguration with environment-backed values
        """
        return cls(
            column_padding=loader.get('column_padding', DEFAULT_COLUMN_PADDING),
            include_ops_descriptors=loader.get('ops_descriptors', False),
            include_system_info=loader.get('system_info', False),
            include_detailed_system_info=loader.get('detailed_system_info', False),
            section_per_group=loader.get('section_per_group', False),
            section_headers=loader.get('section_headers', True),
            name_sections=loader.get('name_sections', False),
        )


__all__ = [
    'Result',
    'MeasurementRecord',
    'RecordSet',
    'ColumnHeaders',
    'ReportConfiguration',
]
