"""Rich terminal front end — board rendering, play loop, and leaderboard.

Arrow keys / WASD roll the cube on the opposite side of the empty cell
into it, the same way tiles slide in a classic fifteen puzzle.
"""

from __future__ import annotations

from datetime import timedelta

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rollingcubes.cli.input_handler import get_key
from rollingcubes.config import LEADERBOARD_SIZE
from rollingcubes.engine.gameplay import GamePlay
from rollingcubes.models.board import Board
from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction
from rollingcubes.models.result import GameResult, GameResultStore

console = Console()

_DIRECTIONS = {d.value: d for d in Direction}


# -- helpers ------------------------------------------------------------------


def format_duration(duration: timedelta | float) -> str:
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else duration
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- rendering ----------------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table showing the face on top of every cube."""
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in board.tiles:
        table.add_column(width=3, justify="center")

    for row in board.tiles:
        cells: list[str] = []
        for cube in row:
            if cube is Cube.EMPTY:
                cells.append(f"[dim]{cube.face}[/dim]")
            elif cube is board.goal:
                cells.append(f"[bold green]{cube.face} {cube}[/bold green]")
            else:
                cells.append(f"[bold white]{cube.face} {cube}[/bold white]")
        table.add_row(*cells)

    return table


def render_leaderboard(results: list[GameResult]) -> Table:
    table = Table(
        title="Best times",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Player", style="bold")
    table.add_column("Steps", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")
    table.add_column("Date", style="dim")

    for i, r in enumerate(results, 1):
        date = r.created.astimezone().strftime("%Y-%m-%d %H:%M") if r.created else ""
        table.add_row(str(i), r.player, str(r.steps), format_duration(r.duration), date)
    return table


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Steps: ", style="dim")
    stats.append(str(game.state.steps), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_duration(game.state.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  roll   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  give up", style="dim")

    goal = game.state.board.goal
    panel = Panel(
        Align.center(render_board(game.state.board)),
        title=f"[bold cyan]Rolling Cubes  —  {game.state.player}[/bold cyan]",
        subtitle=f"[dim]turn every cube to {goal.face} {goal}[/dim]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_result(game: GamePlay, result: GameResult) -> None:
    console.clear()

    headline = Text()
    if result.solved:
        headline.append("\n  ★ SOLVED! ★\n", style="bold green")
    else:
        headline.append("\n  Game abandoned.\n", style="bold yellow")

    stats = Text()
    stats.append("  Steps: ", style="dim")
    stats.append(str(result.steps), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_duration(result.duration), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(render_board(game.state.board)),
            Align.center(headline),
            Align.center(stats),
        ),
        title="[bold]Rolling Cubes[/bold]",
        border_style="bold green" if result.solved else "yellow",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_menu(player: str) -> None:
    console.clear()

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Leaderboard    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(Text(f"Player: {player}", style="bold")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]R O L L I N G   C U B E S[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def show_leaderboard(store: GameResultStore, top: int = LEADERBOARD_SIZE) -> None:
    results = store.best_results(top)
    if not results:
        console.print(Align.center(Text("  No solved games yet.", style="dim")))
        return
    console.print(Align.center(render_leaderboard(results)))


# -- game loop ----------------------------------------------------------------


def _record(game: GamePlay, store: GameResultStore) -> GameResult:
    """Stop *game* and save its result unless no cube was rolled."""
    result = game.finish()
    if result.steps > 0:
        result = store.save(result)
    return result


def _play_game(player: str, store: GameResultStore) -> None:
    game = GamePlay(player)
    status = ""

    while not game.is_won:
        _draw_game(game, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            if not game.move(_DIRECTIONS[key]):
                status = "[yellow]No cube can roll that way.[/yellow]"
        elif key == "restart":
            _record(game, store)
            game = GamePlay(player)
        elif key == "quit":
            break

    result = _record(game, store)
    _draw_result(game, result)

    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- public entry point -------------------------------------------------------


def run(player: str, store: GameResultStore, top: int = LEADERBOARD_SIZE) -> None:
    """Launch the Rich front end with its menu."""
    while True:
        _draw_menu(player)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key in ("1", "enter"):
            _play_game(player, store)
        elif key == "2":
            console.clear()
            show_leaderboard(store, top)
            console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
            get_key()
