from __future__ import annotations
from dataclasses import dataclass

TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "*"
TOK_FLOOR = "-"
TOK_GOAL = "+"
TOK_ROW_END = "\n"


def is_box(sym: str) -> bool:
    """Boxes are ASCII letters; the case carries the goal bit."""
    return len(sym) == 1 and sym.isascii() and sym.isalpha()


@dataclass(frozen=True, slots=True)
class Alphabet:
    """
    Cell symbols of a map buffer.

      player:         player standing on plain floor
      player_on_goal: player standing on a goal
      floor:          empty floor
      goal:           empty goal
      row_end:        row terminator (not a cell)
      'A'..'Z':       box on floor
      'a'..'z':       the same box on a goal
    Everything else is a wall or void.
    """

    player: str = TOK_PLAYER
    player_on_goal: str = TOK_PLAYER_ON_GOAL
    floor: str = TOK_FLOOR
    goal: str = TOK_GOAL
    row_end: str = TOK_ROW_END

    def validate(self) -> "Alphabet":
        markers = {
            "player": self.player,
            "player_on_goal": self.player_on_goal,
            "floor": self.floor,
            "goal": self.goal,
            "row_end": self.row_end,
        }
        for name, sym in markers.items():
            if not isinstance(sym, str) or len(sym) != 1:
                raise ValueError(f"{name} must be a single character, got {sym!r}")
            if is_box(sym):
                raise ValueError(f"{name} {sym!r} collides with box letters")
        if len(set(markers.values())) != len(markers):
            raise ValueError(f"alphabet markers must be distinct: {markers}")
        return self

    # ---- classification
    def is_player(self, sym: str) -> bool:
        return sym == self.player or sym == self.player_on_goal

    def is_walkable(self, sym: str) -> bool:
        """Cells a player may walk through and a pushed box may enter."""
        return sym == self.floor or sym == self.goal or self.is_player(sym)

    def is_box(self, sym: str) -> bool:
        return is_box(sym)

    def is_goal_tile(self, sym: str) -> bool:
        """Whether the cell holding ``sym`` is a goal, whatever stands on it."""
        if is_box(sym):
            return sym.islower()
        return sym == self.goal or sym == self.player_on_goal

    # ---- encoding
    def box_symbol(self, letter: str, on_goal: bool) -> str:
        return letter.lower() if on_goal else letter.upper()

    def player_symbol(self, on_goal: bool) -> str:
        return self.player_on_goal if on_goal else self.player

    def floor_symbol(self, on_goal: bool) -> str:
        return self.goal if on_goal else self.floor


DEFAULT_ALPHABET = Alphabet()
