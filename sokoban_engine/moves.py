from __future__ import annotations
from collections import deque
from typing import Iterable, Optional

from .board import Board, set_bit, has_bit
from .topology import Direction
from .undo import MoveRecord


def iter_bits(mask: int) -> Iterable[int]:
    """Iterates over the indices of set bits."""
    idx = 0
    m = mask
    while m:
        if m & 1:
            yield idx
        m >>= 1
        idx += 1


# ---- reachability

def player_reachable(board: Board, origin: Optional[int] = None) -> int:
    """Returns the bitmask of cells the player can walk to without pushing boxes."""
    start = board.find_player() if origin is None else origin
    if not board.is_inside(start):
        return 0
    walkable = board.alphabet.is_walkable
    visited = set_bit(0, start)
    q = deque([start])

    while q:
        cur = q.popleft()
        for nb in board.neighbors(cur):
            if has_bit(visited, nb) or not walkable(board[nb]):
                continue
            visited = set_bit(visited, nb)
            q.append(nb)
    return visited


def reachable_cells(board: Board, origin: Optional[int] = None) -> Iterable[int]:
    return iter_bits(player_reachable(board, origin))


def can_reach(board: Board, origin: int, destination: int) -> bool:
    """True if a walk from origin to destination exists through walkable cells.

    Boxes and walls block the walk; the origin cell itself is not checked.
    Stops as soon as the destination is labeled.
    """
    if not board.is_inside(origin) or not board.is_inside(destination):
        return False
    if origin == destination:
        return True
    walkable = board.alphabet.is_walkable
    visited = set_bit(0, origin)
    q = deque([origin])

    while q:
        cur = q.popleft()
        for nb in board.neighbors(cur):
            if has_bit(visited, nb) or not walkable(board[nb]):
                continue
            if nb == destination:
                return True
            visited = set_bit(visited, nb)
            q.append(nb)
    return False


# ---- board mutation

def shift_box(board: Board, origin: int, destination: int) -> None:
    """Moves the box at origin to destination; the player takes origin.

    Every touched cell keeps its goal bit: the player's old cell becomes
    bare floor or goal, the box takes the case of the goal bit found at
    destination, and the player marker at origin follows origin's goal bit.
    """
    ab = board.alphabet
    player = board.find_player()
    if player >= 0:
        board[player] = ab.floor_symbol(ab.is_goal_tile(board[player]))
    box = board[origin]
    origin_on_goal = ab.is_goal_tile(box)
    board[destination] = ab.box_symbol(box, ab.is_goal_tile(board[destination]))
    board[origin] = ab.player_symbol(origin_on_goal)


def apply_push(board: Board, box: int, destination: int) -> None:
    """Push the box at `box` into `destination`; the player ends on `box`."""
    shift_box(board, box, destination)


def revert_push(board: Board, record: MoveRecord) -> bool:
    """Structural inverse of apply_push, driven by the record and the current board.

    Returns False if the recorded box or its previous cell cannot be found.
    """
    ab = board.alphabet
    box, _ = board.find_box(record.box_letter)
    if box < 0:
        return False
    back = board.neighbor(box, record.direction.opposite)
    if back is None:
        return False
    # the box returns to where the player now stands, the player lands on the box
    shift_box(board, box, back)
    board[box] = ab.floor_symbol(ab.is_goal_tile(board[box]))
    board[record.player_pos] = ab.player_symbol(ab.is_goal_tile(board[record.player_pos]))
    return True


def push_geometry(board: Board, box: int, direction: Direction):
    """(destination, stand) for pushing the box at `box`: the cell the box
    moves into and the cell the player pushes from. Either may be None."""
    return board.neighbor(box, direction), board.neighbor(box, direction.opposite)
