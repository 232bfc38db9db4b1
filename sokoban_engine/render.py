from .board import Board


def render_ascii(board: Board) -> str:
    """The map exactly as it sits in the buffer, row terminators included."""
    return board.text
