"""
Configuration constants for gridpath.

Defaults: 25x50 grid, 10 ms per visited node ("normal" speed).
A few values can be overridden from the environment; CLI flags override both.
"""

import os
from pathlib import Path

# =============================================================================
# Grid defaults
# =============================================================================

DEFAULT_ROWS = 25
DEFAULT_COLS = 50

# =============================================================================
# Search defaults
# =============================================================================

DEFAULT_PLANNER = "a_star"

# Pause (seconds) after each visited-node notification
SPEED_PRESETS = {
    "slow": 0.05,
    "normal": 0.01,
    "fast": 0.001,
}
DEFAULT_STEP_DELAY = float(os.environ.get("GRIDPATH_STEP_DELAY", SPEED_PRESETS["normal"]))

# Comparison runs are never throttled
COMPARE_STEP_DELAY = 0.0

# =============================================================================
# Output / logging
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent
RESULTS_DIR = Path(os.environ.get("GRIDPATH_RESULTS_DIR", PROJECT_ROOT / "results"))

LOG_LEVEL = os.environ.get("GRIDPATH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
