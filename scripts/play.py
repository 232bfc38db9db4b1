from __future__ import annotations
import argparse
import logging
import sys

from sokoban_engine.config import load_config
from sokoban_engine.levels.resolve import load_board_by_id
from sokoban_engine.session import run_session

"""
Play a map from the terminal.

Usage:
  python -m scripts.play < game.txt                    # map + commands on stdin
  python -m scripts.play --level levels/examples/intro.txt#1
  python -m scripts.play --config configs/xsb.yaml --input moves.txt < map.txt
"""


def main():
    p = argparse.ArgumentParser(description="Push lettered boxes around a map.")
    p.add_argument("--config", type=str, default=None, help="YAML config (symbols and controls)")
    p.add_argument("--level", type=str, default=None, help="path/to/file.txt#idx; default: read the map from stdin")
    p.add_argument("--input", type=str, default=None, help="commands file; default: stdin")
    p.add_argument("--log-level", type=str, default="WARNING")
    args = p.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = load_config(args.config)
    board = load_board_by_id(args.level, cfg.alphabet) if args.level else None

    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            run_session(f, sys.stdout, cfg, board=board)
    else:
        run_session(sys.stdin, sys.stdout, cfg, board=board)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
