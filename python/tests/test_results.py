"""Result store tests — persistence and leaderboard ordering."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from rollingcubes.models.result import GameResult, GameResultStore

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


# -- helpers ------------------------------------------------------------------


def _result(
    player: str = "alice",
    solved: bool = True,
    seconds: float = 60.0,
    created: datetime | None = None,
    steps: int = 30,
) -> GameResult:
    return GameResult(
        player=player,
        solved=solved,
        steps=steps,
        duration=timedelta(seconds=seconds),
        created=created,
    )


@pytest.fixture
def store(tmp_path: Path) -> GameResultStore:
    return GameResultStore(tmp_path / "data" / "results.json")


# -- save ---------------------------------------------------------------------


def test_save_stamps_creation_time(store: GameResultStore) -> None:
    saved = store.save(_result())
    assert saved.created is not None
    assert saved.created.tzinfo is not None


def test_save_keeps_existing_creation_time(store: GameResultStore) -> None:
    assert store.save(_result(created=T0)).created == T0


def test_save_writes_json_file(store: GameResultStore) -> None:
    store.save(_result(created=T0, seconds=12.5))
    data = json.loads(store.filepath.read_text())
    assert data == [
        {
            "player": "alice",
            "solved": True,
            "steps": 30,
            "duration": 12.5,
            "created": T0.isoformat(),
        }
    ]


def test_results_survive_reload(store: GameResultStore) -> None:
    store.save(_result(player="alice", created=T0))
    store.save(_result(player="bob", solved=False, created=T0))

    reloaded = GameResultStore(store.filepath)
    assert reloaded.all_results() == store.all_results()


@pytest.mark.parametrize(
    "result",
    [_result(player=""), _result(player="   "), _result(steps=-1)],
    ids=["empty-player", "blank-player", "negative-steps"],
)
def test_save_rejects_invalid_results(store: GameResultStore, result: GameResult) -> None:
    with pytest.raises(ValueError):
        store.save(result)
    assert store.all_results() == []


# -- leaderboard --------------------------------------------------------------


def test_best_results_only_solved_fastest_first(store: GameResultStore) -> None:
    store.save(_result(player="slow", seconds=90, created=T0))
    store.save(_result(player="gave-up", solved=False, seconds=5, created=T0))
    store.save(_result(player="fast", seconds=30, created=T0))
    store.save(_result(player="middle", seconds=60, created=T0))

    assert [r.player for r in store.best_results(10)] == ["fast", "middle", "slow"]


def test_best_results_ties_newest_first(store: GameResultStore) -> None:
    store.save(_result(player="old", created=T0))
    store.save(_result(player="new", created=T0 + timedelta(days=1)))
    store.save(_result(player="mid", created=T0 + timedelta(hours=1)))

    assert [r.player for r in store.best_results(3)] == ["new", "mid", "old"]


def test_best_results_truncates(store: GameResultStore) -> None:
    for i in range(5):
        store.save(_result(player=f"p{i}", seconds=10 + i, created=T0))

    assert [r.player for r in store.best_results(2)] == ["p0", "p1"]


def test_best_results_on_empty_store(store: GameResultStore) -> None:
    assert store.best_results(5) == []


@pytest.mark.parametrize("n", [0, -3])
def test_best_results_requires_positive_n(store: GameResultStore, n: int) -> None:
    with pytest.raises(ValueError):
        store.best_results(n)


def test_failed_write_keeps_store_unchanged(tmp_path: Path) -> None:
    target = tmp_path / "results.json"
    target.mkdir()
    store = GameResultStore(tmp_path / "other.json")
    store.filepath = target

    with pytest.raises(OSError):
        store.save(_result())

    assert store.all_results() == []
    assert store.best_results(5) == []


def test_timestamps_without_offset_load_as_utc(tmp_path: Path) -> None:
    path = tmp_path / "results.json"
    path.write_text(json.dumps([
        {
            "player": "legacy",
            "solved": True,
            "steps": 10,
            "duration": 60.0,
            "created": "2024-01-01T00:00:00",
        }
    ]))
    store = GameResultStore(path)
    store.save(_result(player="fresh", seconds=60.0))

    loaded = store.all_results()[0]
    assert loaded.created == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert [r.player for r in store.best_results(5)] == ["fresh", "legacy"]
