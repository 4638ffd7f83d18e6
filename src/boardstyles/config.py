"""Environment-driven defaults for the CLI.

Environment first, with fallbacks that keep the CLI usable when nothing is set.
"""

from __future__ import annotations

import logging
import os

STYLES = ("procedural", "oop")
DEFAULT_STYLE = "procedural"
DEFAULT_LOG_LEVEL = "INFO"


def default_style() -> str:
    """Style used when ``--style`` is omitted.

    Order: env var BOARDSTYLES_STYLE -> "procedural".
    """
    env = os.getenv("BOARDSTYLES_STYLE")
    if not env:
        return DEFAULT_STYLE
    style = env.strip().lower()
    if style not in STYLES:
        logging.warning("Ignoring BOARDSTYLES_STYLE=%r; expected one of %s", env, ", ".join(STYLES))
        return DEFAULT_STYLE
    return style


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = (os.getenv("BOARDSTYLES_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
