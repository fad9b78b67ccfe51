# Path: benchutil/tests/unit/test_group_partitioner.py
"""
Unit Tests for the Group Partitioner
"""

import pytest

from benchutil.errors import EmptyInputError
from benchutil.output.sections import (
    count_boundaries,
    find_boundaries,
    walk_records,
)


class TestWalkRecords:
    """Test boundary detection."""

    def test_boundaries_are_positional(self, mixed_group_records):
        """a,a,b,b,a,c has three group changes."""
        assert count_boundaries(mixed_group_records, section_per_group=True) == 3

    def test_no_boundaries_when_disabled(self, mixed_group_records):
        """Without section_per_group no boundary is reported."""
        assert count_boundaries(mixed_group_records, section_per_group=False) == 0

    def test_boundary_details(self, mixed_group_records):
        """Each boundary names the new group, the old group and the index."""
        boundaries = find_boundaries(mixed_group_records, section_per_group=True)

        assert [(b.previous, b.group, b.index) for b in boundaries] == [
            ('a', 'b', 2),
            ('b', 'a', 4),
            ('a', 'c', 5),
        ]

    def test_records_yielded_in_order(self, mixed_group_records):
        """Every record is yielded once, in input order."""
        walked = [r for _, r in walk_records(mixed_group_records, True)]

        assert walked == mixed_group_records

    def test_first_record_never_a_boundary(self, two_group_records):
        """The first record opens the first section without an event."""
        first_boundary, _ = next(iter(walk_records(two_group_records, True)))

        assert first_boundary is None

    def test_single_group(self, two_group_records):
        """One group throughout means no boundaries."""
        same = [two_group_records[0], two_group_records[0]]

        assert count_boundaries(same, section_per_group=True) == 0

    def test_empty_rejected(self):
        """An empty sequence is an error."""
        with pytest.raises(EmptyInputError):
            list(walk_records([], True))
