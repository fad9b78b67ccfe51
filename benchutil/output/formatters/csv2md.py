# Path: benchutil/output/formatters/csv2md.py
"""
CSV to Markdown Transform

Second stage of Markdown rendering: turns a CSV buffer into a
Markdown pipe table. It knows nothing about benchmarks; it takes CSV
text, a per-column alignment list ('l' or 'r') and either an embedded
header row or headers supplied out of band.

Table drawing is delegated to tabulate's 'pipe' format with number
parsing disabled, so cell text is kept as written in the CSV apart from
the escaping pipe tables need: '|' becomes '\\|', line breaks become
'<br>', and leading or trailing spaces become '&nbsp;' (tabulate would
strip them).
"""

import csv
import io
from typing import Optional, Sequence, Union

from tabulate import tabulate

from ...constants import ALIGN_LEFT, ALIGN_RIGHT
from ...core.logger import get_output_logger
from ...errors import MarkdownTransformError


logger = get_output_logger('csv2md')

ALIGNMENT_NAMES = {
    ALIGN_LEFT: 'left',
    ALIGN_RIGHT: 'right',
    'c': 'center',
}

NBSP = '&nbsp;'
LINE_BREAK = '<br>'


def escape_cell(text: str) -> str:
    """Make one cell safe to place in a pipe table row."""
    text = text.replace('|', '\\|')
    text = text.replace('\r\n', LINE_BREAK).replace('\r', LINE_BREAK).replace('\n', LINE_BREAK)
    core = text.strip(' ')
    if not core:
        return NBSP * len(text)
    lead = len(text) - len(text.lstrip(' '))
    trail = len(text) - len(text.rstrip(' '))
    return NBSP * lead + core + NBSP * trail


def csv_to_markdown(
    csv_data: Union[str, bytes],
    alignments: Sequence[str],
    headers: Optional[Sequence[str]] = None,
    has_header: bool = True,
) -> str:
    """
    Convert CSV into a Markdown table.

    Args:
        csv_data: CSV text or UTF-8 bytes
        alignments: One of 'l', 'r', 'c' per column
        headers: Header labels when the CSV carries none
        has_header: True if the first CSV row is the header

    Returns:
        Markdown table text ending with a newline

    Raises:
        MarkdownTransformError: If the CSV is malformed or does not
            match the header/alignment shape
    """
    if isinstance(csv_data, bytes):
        try:
            csv_data = csv_data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MarkdownTransformError(f"CSV is not valid UTF-8: {e}") from e

    try:
        rows = list(csv.reader(io.StringIO(csv_data), strict=True))
    except csv.Error as e:
        raise MarkdownTransformError(f"malformed CSV: {e}") from e

    if has_header:
        if not rows:
            raise MarkdownTransformError("CSV has no header row")
        headers, rows = rows[0], rows[1:]
    elif headers is None:
        raise MarkdownTransformError("no header row in CSV and none supplied")

    width = len(headers)
    if len(alignments) != width:
        raise MarkdownTransformError(
            f"{len(alignments)} alignments given for {width} columns"
        )
    for line_no, row in enumerate(rows, start=1):
        if len(row) != width:
            raise MarkdownTransformError(
                f"CSV row {line_no} has {len(row)} fields, expected {width}"
            )

    try:
        colalign = [ALIGNMENT_NAMES[a] for a in alignments]
    except KeyError as e:
        raise MarkdownTransformError(f"unknown alignment {e.args[0]!r}") from e

    table = tabulate(
        [[escape_cell(cell) for cell in row] for row in rows],
        headers=[escape_cell(h) for h in headers],
        tablefmt='pipe',
        colalign=colalign,
        disable_numparse=True,
    )
    logger.debug(f"Transformed {len(rows)} CSV rows into a {width}-column table")
    return table + '\n'


__all__ = ['csv_to_markdown', 'escape_cell', 'ALIGNMENT_NAMES']
