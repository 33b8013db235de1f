"""Project-wide constants."""

from pathlib import Path

SIZE = 4
GOAL = 2

DEFAULT_DATA_DIR = Path.home() / ".rolling-cubes"
RESULTS_FILE = "results.json"
LEADERBOARD_SIZE = 10
