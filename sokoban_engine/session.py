"""Play session: map reader and command loop.

Input is one character stream. It starts with the map, terminated by an empty
row (two row terminators in a row) or end of input. Commands follow, one
character each, except pushes which are a box letter followed by a direction
token:

  quit token / end of input   end the session
  show token                  write the current map
  undo token                  revert the last push
  <letter><direction>         push that box
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO

from .board import Board
from .config import Controls, EngineConfig, default_config
from .engine import Engine
from .render import render_ascii

logger = logging.getLogger(__name__)

QUIT = "quit"
SHOW = "show"
UNDO = "undo"
PUSH = "push"


@dataclass(frozen=True, slots=True)
class Command:
    kind: str
    letter: Optional[str] = None
    token: Optional[str] = None


@dataclass
class ReplayStats:
    applied: int = 0
    rejected: int = 0
    undone: int = 0


def _chars(stream: TextIO) -> Iterator[str]:
    while True:
        ch = stream.read(1)
        if not ch:
            return
        yield ch


def read_map(stream: TextIO, row_end: str = "\n") -> str:
    """Reads the map up to an empty row; the second terminator is consumed, not kept."""
    out = []
    last_end = False
    for ch in _chars(stream):
        if ch == row_end:
            if last_end:
                break
            last_end = True
        else:
            last_end = False
        out.append(ch)
    return "".join(out)


def iter_commands(chars: Iterable[str], controls: Controls) -> Iterator[Command]:
    """Turns a character stream into commands; always ends with a quit command."""
    it = iter(chars)
    for ch in it:
        if ch == controls.quit:
            break
        if ch == controls.show:
            yield Command(SHOW)
        elif ch == controls.undo:
            yield Command(UNDO)
        else:
            token = next(it, None)
            if token is None:
                break
            yield Command(PUSH, letter=ch, token=token)
    yield Command(QUIT)


def execute(engine: Engine, cmd: Command, stats: Optional[ReplayStats] = None) -> None:
    if cmd.kind == PUSH:
        ok = engine.try_push(cmd.letter, cmd.token)
        if stats is not None:
            if ok:
                stats.applied += 1
            else:
                stats.rejected += 1
    elif cmd.kind == UNDO:
        ok = engine.undo()
        if stats is not None and ok:
            stats.undone += 1


def replay(engine: Engine, commands: str) -> ReplayStats:
    """Runs a scripted command string against the engine; show commands are ignored."""
    stats = ReplayStats()
    for cmd in iter_commands(commands, engine.controls):
        if cmd.kind == QUIT:
            break
        execute(engine, cmd, stats)
    return stats


def run_session(stream: TextIO, out: TextIO, config: Optional[EngineConfig] = None,
                board: Optional[Board] = None) -> Engine:
    """Reads a map (unless one is given), prints it and plays commands until quit."""
    config = config or default_config()
    if board is None:
        board = Board.from_text(read_map(stream, config.alphabet.row_end), config.alphabet)
    logger.info(f"map loaded: {len(board)} cells")
    engine = Engine(board, controls=config.controls)
    out.write(render_ascii(engine.board))

    for cmd in iter_commands(_chars(stream), config.controls):
        if cmd.kind == QUIT:
            break
        if cmd.kind == SHOW:
            out.write(render_ascii(engine.board))
        else:
            execute(engine, cmd)

    engine.reset_history()
    return engine
