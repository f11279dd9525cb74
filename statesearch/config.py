# statesearch/config.py
from __future__ import annotations

import logging
import os
from typing import Optional

# ---- Tunables (overridable via environment variables) -----------------------
DLS_LIMIT     = int(os.getenv("STATESEARCH_DLS_LIMIT", "12"))        # depth-limited search
IDS_MAX_DEPTH = int(os.getenv("STATESEARCH_IDS_MAX_DEPTH", "32"))    # iterative deepening cap
PUZZLE_ROW    = os.getenv("STATESEARCH_PUZZLE_ROW", "1,2,3,4,0,5,7,8,6")
LOG_LEVEL     = os.getenv("STATESEARCH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root handlers once, for the CLI and benchmark scripts. Library code never calls this."""
    name = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level {name!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("statesearch").setLevel(numeric)
    # matplotlib is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
