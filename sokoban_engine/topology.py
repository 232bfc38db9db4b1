"""
Neighbor lookup over a flat, ragged map buffer.

Rows are separated by a terminator character and may have different lengths.
No width is stored: the column of a cell is its distance from the preceding
terminator, and the adjacent row is framed by scanning for terminators.
A vertical step into a row that is too short has no neighbor.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterator, Optional, Sequence

from .symbols import TOK_ROW_END


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# ---- terminator scans

def next_row_end(cells: Sequence[str], origin: int, row_end: str = TOK_ROW_END) -> int:
    """Index of the first terminator at or after origin, len(cells) if none."""
    n = len(cells)
    i = origin
    while i < n and cells[i] != row_end:
        i += 1
    return i


def prev_row_end(cells: Sequence[str], origin: int, row_end: str = TOK_ROW_END) -> int:
    """Index of the last terminator at or before origin, -1 if none."""
    i = origin
    while i > -1 and cells[i] != row_end:
        i -= 1
    return i


def column(cells: Sequence[str], idx: int, row_end: str = TOK_ROW_END) -> int:
    """1-based distance from the preceding terminator (or buffer start)."""
    return idx - prev_row_end(cells, idx, row_end)


# ---- single steps

def right(cells: Sequence[str], idx: int, row_end: str = TOK_ROW_END) -> Optional[int]:
    if idx + 1 < len(cells) and cells[idx + 1] != row_end:
        return idx + 1
    return None


def left(cells: Sequence[str], idx: int, row_end: str = TOK_ROW_END) -> Optional[int]:
    if idx - 1 > -1 and cells[idx - 1] != row_end:
        return idx - 1
    return None


def bottom(cells: Sequence[str], idx: int, row_end: str = TOK_ROW_END) -> Optional[int]:
    col = column(cells, idx, row_end)
    end_1 = next_row_end(cells, idx, row_end)
    end_2 = next_row_end(cells, end_1 + 1, row_end)
    if end_1 + col < end_2:
        return end_1 + col
    return None


def top(cells: Sequence[str], idx: int, row_end: str = TOK_ROW_END) -> Optional[int]:
    end_2 = prev_row_end(cells, idx, row_end)
    end_1 = prev_row_end(cells, end_2 - 1, row_end)
    col = idx - end_2
    # end_1 is -2 when idx sits in the first row
    if end_1 >= -1 and end_1 + col < end_2:
        return end_1 + col
    return None


_STEP = {
    Direction.UP: top,
    Direction.DOWN: bottom,
    Direction.LEFT: left,
    Direction.RIGHT: right,
}


def neighbor(cells: Sequence[str], idx: int, direction: Direction,
             row_end: str = TOK_ROW_END) -> Optional[int]:
    """Index of the cell next to idx in the given direction, None at an edge."""
    return _STEP[direction](cells, idx, row_end)


def neighbors(cells: Sequence[str], idx: int, row_end: str = TOK_ROW_END) -> Iterator[int]:
    """4-neighborhood without diagonals."""
    for d in (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        nb = neighbor(cells, idx, d, row_end)
        if nb is not None:
            yield nb
