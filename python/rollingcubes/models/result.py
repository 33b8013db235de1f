"""Game result persistence and the leaderboard."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class GameResult:
    player: str
    solved: bool
    steps: int
    duration: timedelta
    created: datetime | None = None


class GameResultStore:
    """Loads, saves, and queries game results kept in a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._results: list[GameResult] = []
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            self._results = [_from_json(entry) for entry in data]
            logger.debug("Loaded %d results from %s", len(self._results), self.filepath)

    def _write(self, results: list[GameResult]) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = [_to_json(result) for result in results]
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    def save(self, result: GameResult) -> GameResult:
        """Store *result*, stamping its creation time if it has none."""
        if not result.player.strip():
            raise ValueError("The player name must not be empty.")
        if result.steps < 0:
            raise ValueError(f"Step count must be non-negative, got {result.steps}.")
        if result.created is None:
            result = replace(result, created=datetime.now(timezone.utc))
        results = [*self._results, result]
        self._write(results)
        self._results = results
        logger.info(
            "Saved result of %s (solved=%s, steps=%d)",
            result.player, result.solved, result.steps,
        )
        return result

    # -- queries --------------------------------------------------------------

    def best_results(self, n: int) -> list[GameResult]:
        """Return the *n* fastest solved games, most recent first on ties."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}.")
        solved = [r for r in self._results if r.solved]
        # Stable sorts: newest first, then fastest first.
        solved.sort(key=lambda r: r.created or _EPOCH, reverse=True)
        solved.sort(key=lambda r: r.duration)
        return solved[:n]

    def all_results(self) -> list[GameResult]:
        return list(self._results)


def _to_json(result: GameResult) -> dict:
    return {
        "player": result.player,
        "solved": result.solved,
        "steps": result.steps,
        "duration": result.duration.total_seconds(),
        "created": result.created.isoformat() if result.created else None,
    }


def _from_json(entry: dict) -> GameResult:
    created = entry.get("created")
    if created:
        created = datetime.fromisoformat(created)
        # Rows written by hand may lack an offset; they are taken as UTC.
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
    return GameResult(
        player=entry["player"],
        solved=entry["solved"],
        steps=entry["steps"],
        duration=timedelta(seconds=entry["duration"]),
        created=created or None,
    )
