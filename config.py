"""Shared configuration for RunCat Endless."""
from pathlib import Path
import multiprocessing as _mp

from game_engine import TICK_MS, WINDOW_LANES, JUMP_THRESHOLD

# Directories
PROJECT_DIR = Path(__file__).parent
DATA_DIR = PROJECT_DIR / "data"
RESULTS_DIR = PROJECT_DIR / "results"

# Game settings come from the canonical headless engine constants to avoid drift.

# Front end
WINDOW_SIZE = (600, 250)
AUTOPLAY = False
THEME = "light"  # "light" or "dark"

# Simulation settings
SIMS_PER_RUN = 20
SIM_WORKERS = max(2, _mp.cpu_count() - 2)
BATCH_SIZE = 10
MAX_TICKS = 6_000  # ~10 minutes of play at 100ms per tick

# File paths
BEST_SCORE_JSON = DATA_DIR / "best_score.json"
SIM_RESULTS_JSON = RESULTS_DIR / "simulation.json"
