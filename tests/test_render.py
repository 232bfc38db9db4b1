"""Tests for the render module."""

from sokoban_engine.board import Board
from sokoban_engine.engine import Engine
from sokoban_engine.render import render_ascii


def test_render_is_the_buffer():
    lvl = "#####\n#@A+#\n###\n"
    e = Engine(Board.from_text(lvl))
    assert render_ascii(e.board) == lvl
    e.try_push("A", "6")
    assert render_ascii(e.board) == "#####\n#-@a#\n###\n"
