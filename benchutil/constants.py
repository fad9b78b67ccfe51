# Path: benchutil/constants.py
"""
System-Wide Constants for benchutil

Central repository for constant values used across the report engine.
Renderers, the width calculator and the CLI read their labels and
suffixes from here.

Constants are organized by category:
- Columns
- Header Labels
- Descriptor Suffixes
- Layout Defaults
- Output Formats
- Environment Keys
"""

from enum import Enum
from typing import Final


# ==============================================================================
# COLUMNS
# ==============================================================================

class ColumnKey(str, Enum):
    """
    Report columns in their fixed presentation order.

    Textual columns may drop out of a report when every record leaves
    them empty; the four numeric columns are always present.
    """
    GROUP = 'group'
    SUBGROUP = 'subgroup'
    NAME = 'name'
    DESCRIPTION = 'description'
    OPERATIONS = 'operations'
    NS_PER_OP = 'ns_per_op'
    BYTES_PER_OP = 'bytes_per_op'
    ALLOCS_PER_OP = 'allocs_per_op'
    NOTE = 'note'


COLUMN_ORDER: Final[tuple[ColumnKey, ...]] = tuple(ColumnKey)

TEXT_COLUMNS: Final[frozenset[ColumnKey]] = frozenset({
    ColumnKey.GROUP,
    ColumnKey.SUBGROUP,
    ColumnKey.NAME,
    ColumnKey.DESCRIPTION,
    ColumnKey.NOTE,
})

NUMERIC_COLUMNS: Final[tuple[ColumnKey, ...]] = (
    ColumnKey.OPERATIONS,
    ColumnKey.NS_PER_OP,
    ColumnKey.BYTES_PER_OP,
    ColumnKey.ALLOCS_PER_OP,
)


# ==============================================================================
# HEADER LABELS
# ==============================================================================

# CSV headers are fixed; the configurable text/Markdown headers default to them.
CSV_HEADERS: Final[dict[ColumnKey, str]] = {
    ColumnKey.GROUP: 'Group',
    ColumnKey.SUBGROUP: 'SubGroup',
    ColumnKey.NAME: 'Name',
    ColumnKey.DESCRIPTION: 'Description',
    ColumnKey.OPERATIONS: 'Operations',
    ColumnKey.NS_PER_OP: 'Ns/Op',
    ColumnKey.BYTES_PER_OP: 'Bytes/Op',
    ColumnKey.ALLOCS_PER_OP: 'Allocs/Op',
    ColumnKey.NOTE: 'Note',
}


# ==============================================================================
# DESCRIPTOR SUFFIXES
# ==============================================================================

DESCRIPTOR_SUFFIXES: Final[dict[ColumnKey, str]] = {
    ColumnKey.OPERATIONS: ' ops',
    ColumnKey.NS_PER_OP: ' ns/op',
    ColumnKey.BYTES_PER_OP: ' bytes/op',
    ColumnKey.ALLOCS_PER_OP: ' allocs/op',
}

# Extra width reserved when descriptors are on. The operations column gets
# no bump; its header is normally wider than the suffixed value.
DESCRIPTOR_WIDTH_BUMP: Final[dict[ColumnKey, int]] = {
    ColumnKey.OPERATIONS: 0,
    ColumnKey.NS_PER_OP: 6,
    ColumnKey.BYTES_PER_OP: 9,
    ColumnKey.ALLOCS_PER_OP: 10,
}


# ==============================================================================
# LAYOUT DEFAULTS
# ==============================================================================

DEFAULT_COLUMN_PADDING: Final[int] = 2
SEPARATOR_CHAR: Final[str] = '-'
MARKDOWN_SECTION_HEADING: Final[str] = '### '
ALIGN_LEFT: Final[str] = 'l'
ALIGN_RIGHT: Final[str] = 'r'

DEFAULT_REPORT_BASENAME: Final[str] = 'benchmarks'


# ==============================================================================
# OUTPUT FORMATS
# ==============================================================================

class OutputFormat(str, Enum):
    """Output formats supported by the renderers."""
    TEXT = 'text'
    CSV = 'csv'
    MARKDOWN = 'markdown'


FORMAT_ALIASES: Final[dict[str, str]] = {
    'txt': OutputFormat.TEXT.value,
    'md': OutputFormat.MARKDOWN.value,
}


# ==============================================================================
# ENVIRONMENT KEYS
# ==============================================================================

ENV_PREFIX: Final[str] = 'BENCHUTIL_'


__all__ = [
    'ColumnKey',
    'COLUMN_ORDER',
    'TEXT_COLUMNS',
    'NUMERIC_COLUMNS',
    'CSV_HEADERS',
    'DESCRIPTOR_SUFFIXES',
    'DESCRIPTOR_WIDTH_BUMP',
    'DEFAULT_COLUMN_PADDING',
    'SEPARATOR_CHAR',
    'MARKDOWN_SECTION_HEADING',
    'ALIGN_LEFT',
    'ALIGN_RIGHT',
    'DEFAULT_REPORT_BASENAME',
    'OutputFormat',
    'FORMAT_ALIASES',
    'ENV_PREFIX',
]
