"""Global settings for the trace analysis tooling.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`nqueens_trace.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

# Board sizes to evaluate (in ascending order). The replay front-end offers 4..8.
N_VALUES: List[int] = [4, 5, 6, 7, 8]

# Strategies to run, by registry label (see nqueens_trace.solver.STRATEGIES)
STRATEGIES: List[str] = ["DFS", "BFS", "BNB"]

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_trace"

# Replay defaults: delay between steps in milliseconds, board size and strategy
PLAYBACK_SPEED_MS: int = 800
PLAYBACK_BOARD_SIZE: int = 4
PLAYBACK_STRATEGY: str = "DFS"

# Slider bounds of the playback speed control
MIN_SPEED_MS: int = 100
MAX_SPEED_MS: int = 2000

# Output naming policy --------------------------------------------------------

# When True, results and plots will include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_playback_speed(speed_ms: int) -> int:
    """Clamp and store the replay delay; return the value actually used.

    Values outside ``MIN_SPEED_MS..MAX_SPEED_MS`` are pulled back into range,
    the same way the speed slider of the front-end limits them.
    """
    global PLAYBACK_SPEED_MS
    PLAYBACK_SPEED_MS = max(MIN_SPEED_MS, min(MAX_SPEED_MS, int(speed_ms)))
    print(f"Playback speed: {PLAYBACK_SPEED_MS} ms/step")
    return PLAYBACK_SPEED_MS
