"""Undo history for pushes.

Each record keeps only what is needed to invert a push against the current
board: where the player stood before it, the box letter as it was requested,
and the push direction. Cell symbols are re-derived on undo, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .topology import Direction


@dataclass(frozen=True, slots=True)
class MoveRecord:
    player_pos: int
    box_letter: str
    direction: Direction


class UndoLog:
    """LIFO stack of applied pushes."""

    def __init__(self) -> None:
        self._records: List[MoveRecord] = []

    def push(self, record: MoveRecord) -> None:
        self._records.append(record)

    def pop(self) -> Optional[MoveRecord]:
        """Remove and return the most recent record, None if empty."""
        if not self._records:
            return None
        return self._records.pop()

    def peek(self) -> Optional[MoveRecord]:
        return self._records[-1] if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        """Most recent first."""
        return reversed(self._records)
