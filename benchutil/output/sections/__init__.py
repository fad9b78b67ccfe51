# Path: benchutil/output/sections/__init__.py
"""
Report Sections

Splits an ordered record sequence into sections by group. Section
boundaries are format-agnostic; each formatter decides how to draw them.
"""

from .group_partitioner import GroupBoundary, walk_records, find_boundaries, count_boundaries

__all__ = [
    'GroupBoundary',
    'walk_records',
    'find_boundaries',
    'count_boundaries',
]
