from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .symbols import Alphabet, DEFAULT_ALPHABET, is_box
from . import topology
from .topology import Direction

# Bit helpers
__all__ = [
    "Board",
    "bit",
    "has_bit",
    "set_bit",
]

def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def set_bit(mask: int, idx: int) -> int:
    return mask | bit(idx)


@dataclass(eq=False, slots=True)
class Board:
    """
    Mutable Sokoban map kept as the flat character buffer it was read from.

    cells: one character per entry, rows separated by alphabet.row_end.
    Rows may differ in length; there is no (row, column) representation.
    Preconditions (not checked): exactly one player marker, and every box
    letter present at most once in either case.
    """

    cells: List[str]
    alphabet: Alphabet = field(default=DEFAULT_ALPHABET)

    @classmethod
    def from_text(cls, text: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> "Board":
        if not text:
            raise ValueError("Empty map")
        return cls(cells=list(text), alphabet=alphabet)

    # ---- buffer access
    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, idx: int) -> str:
        return self.cells[idx]

    def __setitem__(self, idx: int, sym: str) -> None:
        self.cells[idx] = sym

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    @property
    def text(self) -> str:
        return "".join(self.cells)

    def is_inside(self, idx: int) -> bool:
        return 0 <= idx < len(self.cells)

    # ---- lookups
    def find(self, sym: str) -> int:
        """Index of the first cell holding sym, -1 if absent."""
        try:
            return self.cells.index(sym)
        except ValueError:
            return -1

    def find_player(self) -> int:
        idx = self.find(self.alphabet.player)
        if idx >= 0:
            return idx
        return self.find(self.alphabet.player_on_goal)

    def find_box(self, letter: str) -> Tuple[int, Optional[str]]:
        """Locate a box by its letter in either case.

        Returns (index, symbol actually on the board), or (-1, None).
        """
        if not is_box(letter):
            return -1, None
        for sym in (letter.upper(), letter.lower()):
            idx = self.find(sym)
            if idx >= 0:
                return idx, sym
        return -1, None

    # ---- topology
    def neighbor(self, idx: int, direction: Direction) -> Optional[int]:
        return topology.neighbor(self.cells, idx, direction, self.alphabet.row_end)

    def neighbors(self, idx: int) -> Iterator[int]:
        return topology.neighbors(self.cells, idx, self.alphabet.row_end)

    # ---- state properties
    def box_counts(self) -> Counter:
        """Number of cells per box letter, case-insensitive."""
        return Counter(ch.upper() for ch in self.cells if is_box(ch))

    def player_count(self) -> int:
        return sum(1 for ch in self.cells if self.alphabet.is_player(ch))

    def is_solved(self) -> bool:
        """No box left off a goal."""
        return not any(is_box(ch) and ch.isupper() for ch in self.cells)
