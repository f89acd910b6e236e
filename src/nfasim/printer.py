"""ASCII grid rendering of transition tables."""

import sys
from typing import List, Optional, Sequence, TextIO

from nfasim.table import TransitionTable

HORIZONTAL_BORDER_KNOT = "+"
HORIZONTAL_BORDER_PATTERN = "-"
VERTICAL_BORDER_PATTERN = "|"


def _border(columns: int, width: int) -> str:
    return HORIZONTAL_BORDER_KNOT + (
        HORIZONTAL_BORDER_PATTERN * width + HORIZONTAL_BORDER_KNOT
    ) * columns


def _row(cells: Sequence[str], width: int) -> str:
    return VERTICAL_BORDER_PATTERN + "".join(
        cell.rjust(width) + VERTICAL_BORDER_PATTERN for cell in cells
    )


def format_grid(rows: Sequence[Sequence[str]]) -> str:
    """Render a string matrix as a bordered grid.

    Every cell is left-padded to the width of the widest cell, and the
    borders span as many columns as the widest row has.
    """
    if not rows:
        return ""
    columns = max(len(row) for row in rows)
    width = max((len(cell) for row in rows for cell in row), default=0)
    border = _border(columns, width)

    lines: List[str] = [border]
    for row in rows:
        lines.append(_row(row, width))
        lines.append(border)
    return "\n".join(lines)


def print_table(table: TransitionTable, stream: Optional[TextIO] = None) -> None:
    """Write a transition table as a grid, preceded by a title line."""
    stream = stream if stream is not None else sys.stdout
    stream.write("Transition table:\n")
    stream.write(format_grid(table.to_matrix()) + "\n")
