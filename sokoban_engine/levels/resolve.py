from __future__ import annotations
import logging
from typing import List, Tuple

from ..board import Board
from ..symbols import Alphabet, DEFAULT_ALPHABET

logger = logging.getLogger(__name__)


def parse_level_id(level_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in level_id:
        return level_id, 0
    path, idx = level_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        k = 0
    return path, k


def split_maps(text: str) -> List[str]:
    """Splits a multi-map text on empty rows. Each map keeps a trailing newline,
    the way a map read from a play session does."""
    blocks = []
    cur = []
    for line in text.split("\n"):
        if line == "":
            if cur:
                blocks.append("\n".join(cur) + "\n")
                cur = []
        else:
            cur.append(line)
    if cur:
        blocks.append("\n".join(cur) + "\n")
    return blocks


def load_board_by_id(level_id: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> Board:
    """Loads a SPECIFIC map file#idx even if the file contains dozens of maps."""
    path, wanted = parse_level_id(level_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_maps(content)
    if not blocks:
        raise ValueError(f"No maps found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    logger.info(f"loaded {path}#{wanted}")
    return Board.from_text(blocks[wanted], alphabet)
