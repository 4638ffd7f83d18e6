"""
Side-by-side helpers: run either style on a board and check they agree.
"""
from __future__ import annotations

import logging
import math
import statistics as stats
from typing import Any, Dict, List, Sequence, Tuple

from . import procedural
from .board_basics import check_board, serialize_board
from .config import STYLES
from .oop import TicTacToe


def describe(board: Sequence[str], style: str) -> Dict[str, Any]:
    check_board(board)
    if style == "procedural":
        count = procedural.turn_count(board)
        player = procedural.current_player(board)
        rendered = procedural.render_board(board)
    elif style == "oop":
        game = TicTacToe(board)
        count = game.turn_count()
        player = game.current_player()
        rendered = game.render()
    else:
        raise ValueError(f"Unknown style: {style!r} (expected one of {', '.join(STYLES)})")
    return {
        'board': serialize_board(board),
        'style': style,
        'turn_count': count,
        'current_player': player,
        'rendered': rendered,
    }


def compare_styles(board: Sequence[str]) -> Dict[str, Any]:
    results = {style: describe(board, style) for style in STYLES}
    keys = ('turn_count', 'current_player', 'rendered')
    agree = all(results['procedural'][k] == results['oop'][k] for k in keys)
    if not agree:
        logging.warning("Styles disagree on board %s", serialize_board(board))
    return {**results, 'agree': agree}


def timing_summary(values: List[float]) -> Tuple[float, float]:
    """Mean and 95% confidence half-width of a list of timings."""
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    half = 1.96 * (s / math.sqrt(len(values)))
    return m, half
