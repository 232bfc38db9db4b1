from __future__ import annotations
import argparse, csv, logging, os, time
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from sokoban_engine.config import EngineConfig, load_config
from sokoban_engine.engine import Engine
from sokoban_engine.levels.resolve import load_board_by_id
from sokoban_engine.session import replay

logger = logging.getLogger(__name__)

FIELDS = ["level_id", "applied", "rejected", "undone", "moves", "solved", "error"]


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """'path#idx<TAB>commands' -> (level_id, commands); None for blanks and comments."""
    line = line.rstrip("\n")
    if not line.strip() or line.lstrip().startswith("#"):
        return None
    level_id, _, commands = line.partition("\t")
    return level_id.strip(), commands


def run_one(level_id: str, commands: str, cfg: EngineConfig) -> Dict[str, object]:
    board = load_board_by_id(level_id, cfg.alphabet)
    engine = Engine(board, controls=cfg.controls)
    stats = replay(engine, commands)
    return {
        "level_id": level_id,
        "applied": stats.applied,
        "rejected": stats.rejected,
        "undone": stats.undone,
        "moves": engine.moves,
        "solved": board.is_solved(),
        "error": "",
    }


def main():
    p = argparse.ArgumentParser(description="Replay scripted commands over a list of maps → CSV")
    p.add_argument("--list", required=True, help="lines: path#idx<TAB>commands, e.g. levels/examples/replays.tsv")
    p.add_argument("--config", type=str, default=None)
    p.add_argument("--out", default="results/replays.csv", help="output CSV path")
    p.add_argument("--log-level", type=str, default="WARNING")
    args = p.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    cfg = load_config(args.config)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        jobs = [job for job in (parse_line(ln) for ln in f) if job is not None]

    started = time.time()
    rows: List[dict] = []
    for level_id, commands in tqdm(jobs, desc="Replaying", unit="map"):
        try:
            r = run_one(level_id, commands, cfg)
        except (OSError, ValueError, IndexError) as e:
            logger.warning(f"{level_id}: {e}")
            r = {"level_id": level_id, "applied": 0, "rejected": 0, "undone": 0,
                 "moves": 0, "solved": False, "error": str(e)}
        rows.append(r)

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    tqdm.write(f"done: {len(rows)} maps → {args.out}; total_time={time.time()-started:.2f}s")


if __name__ == "__main__":
    main()
