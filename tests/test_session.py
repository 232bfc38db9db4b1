import io

from sokoban_engine.board import Board
from sokoban_engine.config import Controls, default_config, load_config
from sokoban_engine.engine import Engine
from sokoban_engine.session import (
    PUSH,
    QUIT,
    SHOW,
    UNDO,
    iter_commands,
    read_map,
    replay,
    run_session,
)

MAP = "#####\n#@A+#\n#####\n"
PUSHED = "#####\n#-@a#\n#####\n"


def test_read_map_stops_at_empty_row():
    stream = io.StringIO(MAP + "\nA6.")
    assert read_map(stream) == MAP
    assert stream.read() == "A6."


def test_read_map_until_eof():
    assert read_map(io.StringIO("#@#")) == "#@#"


def test_iter_commands():
    kinds = [c.kind for c in iter_commands("\nA60\n.A6", Controls())]
    assert kinds == [SHOW, PUSH, UNDO, SHOW, QUIT]
    push = list(iter_commands("b4", Controls()))[0]
    assert push.letter == "b" and push.token == "4"


def test_dangling_letter_ends_the_session():
    assert [c.kind for c in iter_commands("A", Controls())] == [QUIT]


def test_run_session_prints_on_request():
    out = io.StringIO()
    stream = io.StringIO(MAP + "\nA6\nA6\n0\n.")
    engine = run_session(stream, out)
    assert out.getvalue() == MAP + PUSHED + PUSHED + MAP
    assert engine.board.text == MAP
    assert len(engine.log) == 0


def test_run_session_with_given_board_and_xsb_config(tmp_path):
    cfg_path = tmp_path / "xsb.yaml"
    cfg_path.write_text('alphabet: {player_on_goal: "+", floor: " ", goal: "."}\n', encoding="utf-8")
    cfg = load_config(str(cfg_path))
    board = Board.from_text("#####\n#@A.#\n#####\n", cfg.alphabet)
    out = io.StringIO()
    run_session(io.StringIO("A6\n"), out, cfg, board=board)
    assert out.getvalue() == "#####\n#@A.#\n#####\n" + "#####\n# @a#\n#####\n"


def test_replay_counts():
    engine = Engine(Board.from_text(MAP), controls=default_config().controls)
    stats = replay(engine, "A6A60Z2")
    assert (stats.applied, stats.rejected, stats.undone) == (1, 2, 1)
    assert engine.board.text == MAP
