#!/usr/bin/env python3
"""
Time the procedural and object-oriented styles on the same seeded boards.

Prints mean and 95% CI per style and operation; the two should be close,
the point being organization rather than speed.
"""
from __future__ import annotations

import argparse
import io
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

from boardstyles import procedural
from boardstyles.board_basics import random_board
from boardstyles.compare import timing_summary
from boardstyles.oop import TicTacToe


@dataclass
class Config:
    seeds: int = 10
    boards: int = 200
    repeats: int = 50


def _time(fn: Callable[[], object], repeats: int) -> float:
    t0 = time.perf_counter()
    for _ in range(repeats):
        fn()
    return time.perf_counter() - t0


def run(cfg: Config) -> Dict[str, tuple]:
    samples: Dict[str, List[float]] = {}
    sink = io.StringIO()
    for s in range(cfg.seeds):
        boards = [random_board(i % 10, seed=s * cfg.boards + i) for i in range(cfg.boards)]
        games = [TicTacToe(b) for b in boards]
        ops = {
            "procedural.turn_count": lambda: [procedural.turn_count(b) for b in boards],
            "procedural.current_player": lambda: [procedural.current_player(b) for b in boards],
            "procedural.display_board": lambda: [procedural.display_board(b, file=sink) for b in boards],
            "oop.turn_count": lambda: [g.turn_count() for g in games],
            "oop.current_player": lambda: [g.current_player() for g in games],
            "oop.display_board": lambda: [g.display_board(file=sink) for g in games],
        }
        for name, fn in ops.items():
            samples.setdefault(name, []).append(_time(fn, cfg.repeats))
        sink.seek(0)
        sink.truncate()
    return {name: timing_summary(vals) for name, vals in samples.items()}


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark both board styles")
    ap.add_argument("--seeds", type=int, default=Config.seeds)
    ap.add_argument("--boards", type=int, default=Config.boards)
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    args = ap.parse_args(argv)
    cfg = Config(seeds=args.seeds, boards=args.boards, repeats=args.repeats)
    summary = run(cfg)
    print(f"## Benchmarks (N={cfg.seeds}, boards={cfg.boards}, repeats={cfg.repeats})\n")
    for name, (m, h) in summary.items():
        print(f"- {name}: mean={m:.4f}s ± {h:.4f}s (95% CI)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
