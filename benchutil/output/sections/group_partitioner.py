# Path: benchutil/output/sections/group_partitioner.py
"""
Group Partitioner

Walks records in the order given and reports where the group value
changes. Grouping is positional: the same group appearing twice with a
different group in between forms two sections. Records are never
reordered.

Usage:
    for boundary, record in walk_records(records, section_per_group=True):
        if boundary is not None:
            ...  # close the previous section, open boundary.group
        ...      # render record
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ...core.logger import get_process_logger
from ...errors import EmptyInputError
from ..report_models import MeasurementRecord


logger = get_process_logger('group_partitioner')


@dataclass(frozen=True)
class GroupBoundary:
    """
    A change of group between two adjacent records.

    Attributes:
        group: Group of the section that starts here
        previous: Group of the section that just ended
        index: Position of the first record of the new section
    """
    group: str
    previous: str
    index: int


def walk_records(
    records: Sequence[MeasurementRecord],
    section_per_group: bool,
) -> Iterator[Tuple[Optional[GroupBoundary], MeasurementRecord]]:
    """
    Yield each record paired with the boundary that precedes it.

    The boundary is None except for the first record of every section
    after the first. With section_per_group off, it is always None.

    Raises:
        EmptyInputError: If records is empty
    """
    if len(records) == 0:
        raise EmptyInputError('group partitioner')

    current = records[0].group
    for index, record in enumerate(records):
        boundary = None
        if section_per_group and index > 0 and record.group != current:
            boundary = GroupBoundary(group=record.group, previous=current, index=index)
            logger.debug(f"Section boundary at {index}: {current!r} -> {record.group!r}")
            current = record.group
        yield boundary, record


def find_boundaries(
    records: Sequence[MeasurementRecord],
    section_per_group: bool,
) -> List[GroupBoundary]:
    """Return every boundary event in order."""
    return [b for b, _ in walk_records(records, section_per_group) if b is not None]


def count_boundaries(
    records: Sequence[MeasurementRecord],
    section_per_group: bool,
) -> int:
    """Return the number of boundary events."""
    return len(find_boundaries(records, section_per_group))


__all__ = ['GroupBoundary', 'walk_records', 'find_boundaries', 'count_boundaries']
