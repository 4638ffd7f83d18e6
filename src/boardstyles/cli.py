from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board_basics import InvalidBoardError, deserialize_board, random_board, serialize_board
from .compare import compare_styles, describe
from .config import STYLES, default_style, log_level


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="boardstyles",
        description="Tic-tac-toe board in two styles: procedural and object-oriented",
    )
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the random subcommand")

    board_help = 'Board string, 9 chars of X/O/. e.g. "XOX......" (use --board=-X....... when it starts with "-")'
    style_help = "Implementation style (default: $BOARDSTYLES_STYLE or procedural)"

    p_show = sub.add_parser("show", help="Print the 3x3 grid for a board")
    p_show.add_argument("--board", required=True, help=board_help)
    p_show.add_argument("--style", choices=STYLES, default=None, help=style_help)

    p_turn = sub.add_parser("turn", help="Show turn count and whose move it is")
    p_turn.add_argument("--board", help=f"{board_help} (omit with --stdin)")
    p_turn.add_argument("--style", choices=STYLES, default=None, help=style_help)
    p_turn.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_cmp = sub.add_parser("compare", help="Run both styles on a board and check they agree")
    p_cmp.add_argument("--board", required=True, help=board_help)

    p_rand = sub.add_parser("random", help="Generate a board with a given number of marks")
    p_rand.add_argument("--turns", type=int, default=4, help="Marks to place, 0-9 (default: 4)")
    p_rand.add_argument("--style", choices=STYLES, default=None, help=style_help)

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: Optional[str]) -> Optional[List[str]]:
    try:
        return deserialize_board(raw or "")
    except InvalidBoardError as e:
        logging.error("Invalid board string: %s", e)
        return None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=log_level(getattr(ns, "verbose", False)),
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("boardstyles"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    style = getattr(ns, "style", None) or default_style()

    if ns.cmd == "show":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        logging.debug("style=%s board=%s", style, serialize_board(board))
        print(describe(board, style)['rendered'])
        return 0

    if ns.cmd == "turn":
        if ns.stdin:
            import csv as _csv
            import sys as _sys
            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "turn_count", "current_player"])
            for line in _sys.stdin:
                raw = line.rstrip("\r\n")
                if not raw.strip():
                    continue
                try:
                    board = deserialize_board(raw)
                except InvalidBoardError as e:
                    logging.debug("Skipping line: %s", e)
                    continue
                res = describe(board, style)
                w.writerow([res['board'], res['turn_count'], res['current_player']])
            return 0
        board = _parse_board(ns.board)
        if board is None:
            return 2
        res = describe(board, style)
        print(f"turn_count={res['turn_count']} current_player={res['current_player']}")
        return 0

    if ns.cmd == "compare":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        res = compare_styles(board)
        for s in STYLES:
            print(f"# {s}: turn_count={res[s]['turn_count']} current_player={res[s]['current_player']}")
            print(res[s]['rendered'])
        print(f"agree={res['agree']}")
        return 0 if res['agree'] else 1

    if ns.cmd == "random":
        try:
            board = random_board(ns.turns, seed=ns.seed)
        except ValueError as e:
            logging.error("%s", e)
            return 2
        res = describe(board, style)
        print(res['board'])
        print(res['rendered'])
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
