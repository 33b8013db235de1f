"""Rolling Cubes.

Usage::

    rolling-cubes -p alice          # play as alice
    rolling-cubes --scores -n 5     # show the five best times
    rolling-cubes -v                # log every roll
"""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from rollingcubes.cli import app as frontend
from rollingcubes.config import DEFAULT_DATA_DIR, LEADERBOARD_SIZE, RESULTS_FILE
from rollingcubes.models.result import GameResultStore

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


@app.command()
def main(
    player: str = typer.Option(
        "player", "-p", "--player",
        help="Name recorded with your results.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show the leaderboard and exit.",
    ),
    top: int = typer.Option(
        LEADERBOARD_SIZE, "-n", "--top",
        min=1,
        help="Number of leaderboard entries to show.",
    ),
    data_dir: Path = typer.Option(
        DEFAULT_DATA_DIR, "--data-dir",
        envvar="ROLLINGCUBES_DATA_DIR",
        file_okay=False,
        help="Directory holding the results file.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every roll.",
    ),
) -> None:
    """Rolling Cubes — turn every die to the same face."""
    _configure_logging(verbose)

    if not player.strip():
        raise typer.BadParameter("must not be empty", param_hint="--player")

    store = GameResultStore(data_dir / RESULTS_FILE)

    if scores:
        frontend.show_leaderboard(store, top)
        return

    frontend.run(player.strip(), store, top)


if __name__ == "__main__":
    app()
