"""
Rich-based terminal display for games.

Provides clean, formatted output with:
- Board panel with both rows and stores
- Move summaries (captures, extra turns)
- Simulation result tables
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core import (
    PLAYER_1_PITS,
    PLAYER_1_STORE,
    PLAYER_2_PITS,
    PLAYER_2_STORE,
    GameState,
    MoveResult,
    get_game_status,
)

console = Console()
logger = logging.getLogger(__name__)


class GameDisplay:
    """
    Rich display for a game in progress.

    Shows:
    - Board, with player 2's pits reversed on top
    - Pit numbers players type to move
    - What the last move did
    """

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize game display.

        Args:
            output: Console to print to (default: module console)
        """
        self.console = output or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def board_table(self, board: Sequence[int], highlight: Sequence[int] = ()) -> Table:
        """Create board table; highlighted pits are drawn in yellow."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        for _ in range(len(PLAYER_1_PITS) + 2):
            table.add_column(justify="center")

        def cell(idx: int) -> str:
            if idx in highlight:
                return f"[bold yellow]{board[idx]:>2}[/bold yellow]"
            return f"{board[idx]:>2}"

        table.add_row("", *[f"[dim]{idx}[/dim]" for idx in reversed(PLAYER_2_PITS)], "")
        table.add_row("", *[cell(idx) for idx in reversed(PLAYER_2_PITS)], "")
        table.add_row(
            f"[bold magenta]{board[PLAYER_2_STORE]:>2}[/bold magenta]",
            *[""] * len(PLAYER_1_PITS),
            f"[bold cyan]{board[PLAYER_1_STORE]:>2}[/bold cyan]",
        )
        table.add_row("", *[cell(idx) for idx in PLAYER_1_PITS], "")
        table.add_row("", *[f"[dim]{idx}[/dim]" for idx in PLAYER_1_PITS], "")

        return table

    def show_state(self, state: GameState, result: Optional[MoveResult] = None):
        """Show board panel with the status line as title."""
        highlight = result.distribution_path if result else ()
        self.console.print(
            Panel(
                self.board_table(state.board, highlight=highlight),
                title=get_game_status(state),
                subtitle="P2 ◂ stores ▸ P1",
                expand=False,
            )
        )

    def show_move(self, player: int, pit_index: int, result: MoveResult):
        """Summarize a move."""
        parts = [f"Player {player} sowed pit {pit_index} ({len(result.distribution_path)} stones)"]
        if result.captured_stones:
            parts.append(f"[green]captured {result.captured_stones}[/green]")
        if result.extra_turn:
            parts.append("[yellow]extra turn[/yellow]")
        if result.game_over:
            parts.append("[bold]game over[/bold]")
        # parts carry their own markup
        self.console.print(f"[blue]ℹ[/blue] {' | '.join(parts)}")

    def show_root_scores(self, scores: List[Tuple[int, float]], chosen: int):
        """Table of minimax values per candidate pit."""
        table = Table(title="Minimax root values")
        table.add_column("Pit", style="cyan", justify="right")
        table.add_column("Value", justify="right")

        for move, value in scores:
            style = "bold green" if move == chosen else ""
            table.add_row(str(move), f"{value:+.1f}", style=style)

        self.console.print(table)

    def show_simulation_results(self, labels: Dict[int, str], wins: Dict[Optional[int], int], stones: Dict[int, int]):
        """Results table for computer-vs-computer simulations."""
        total = sum(wins.values())

        table = Table(title=f"Results over {total:,} games")
        table.add_column("Seat", style="cyan")
        table.add_column("Difficulty")
        table.add_column("Wins", justify="right")
        table.add_column("Win %", justify="right")
        table.add_column("Stones", justify="right")

        for player in (1, 2):
            percent = wins[player] / total * 100 if total else 0.0
            table.add_row(
                f"Player {player}",
                labels[player],
                f"{wins[player]:,}",
                f"{percent:.1f}%",
                f"{stones[player]:,}",
            )
        tie_percent = wins[None] / total * 100 if total else 0.0
        table.add_row("Ties", "", f"{wins[None]:,}", f"{tie_percent:.1f}%", "")

        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
