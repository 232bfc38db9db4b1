from __future__ import annotations
import logging
from typing import Optional, Union

from .board import Board
from .config import Controls
from .moves import apply_push, can_reach, push_geometry, revert_push
from .topology import Direction
from .undo import MoveRecord, UndoLog

logger = logging.getLogger(__name__)


class Engine:
    """Owns one board and its undo history for a single play session.

    Illegal pushes and undo on an empty history are not errors: they
    leave the board and the history untouched and return False.
    """

    def __init__(self, board: Board, log: Optional[UndoLog] = None,
                 controls: Optional[Controls] = None) -> None:
        self.board = board
        self.log = log if log is not None else UndoLog()
        self.controls = controls if controls is not None else Controls()

    def _direction(self, direction: Union[Direction, str]) -> Optional[Direction]:
        if isinstance(direction, Direction):
            return direction
        return self.controls.direction_for(direction)

    def try_push(self, box_letter: str, direction: Union[Direction, str]) -> bool:
        """Push the box named by box_letter (either case) one cell in direction.

        The player has to be able to walk, around boxes and walls, to the
        cell behind the box. Returns True if the push was applied.
        """
        d = self._direction(direction)
        if d is None:
            logger.debug(f"push {box_letter!r}: unknown direction {direction!r}")
            return False

        box, _ = self.board.find_box(box_letter)
        if box < 0:
            logger.debug(f"push {box_letter!r}: no such box")
            return False

        destination, stand = push_geometry(self.board, box, d)
        if destination is None or stand is None:
            logger.debug(f"push {box_letter!r} {d.value}: off the map")
            return False
        if not self.board.alphabet.is_walkable(self.board[destination]):
            logger.debug(f"push {box_letter!r} {d.value}: blocked at {destination}")
            return False
        player = self.board.find_player()
        if not can_reach(self.board, player, stand):
            logger.debug(f"push {box_letter!r} {d.value}: player cannot reach {stand}")
            return False

        self.log.push(MoveRecord(player_pos=player, box_letter=box_letter, direction=d))
        apply_push(self.board, box, destination)
        return True

    def undo(self) -> bool:
        """Revert the most recent push. False if there is nothing to undo."""
        record = self.log.pop()
        if record is None:
            logger.debug("undo: history is empty")
            return False
        if not revert_push(self.board, record):
            # only reachable when the board was edited outside the engine
            logger.warning(f"undo: cannot locate box {record.box_letter!r}, record dropped")
            return False
        return True

    def reset_history(self) -> None:
        self.log.clear()

    @property
    def moves(self) -> int:
        return len(self.log)
