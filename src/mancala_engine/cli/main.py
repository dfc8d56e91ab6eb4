"""
Main CLI for the Mancala engine.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from tqdm import tqdm

from ..ai import ComputerPlayer, Difficulty, SEARCH_DEPTH, score_root_moves
from ..core import (
    BOARD_SIZE,
    GameState,
    get_game_result,
    get_scores,
    get_valid_moves,
    play_move,
    validate_board,
    validate_player,
)
from ..errors import MancalaError
from ..utils.rich_display import GameDisplay, setup_rich_logging

DIFFICULTIES = [d.value for d in Difficulty]


def setup_logging(level: str = "INFO", rich_logs: bool = False) -> None:
    """Configure logging."""
    if rich_logs:
        setup_rich_logging(level)
        return

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_board(text: str) -> List[int]:
    """
    Parse a comma separated board.

    Args:
        text: 14 integers, e.g. "4,4,4,4,4,4,0,4,4,4,4,4,4,0"

    Returns:
        Board list

    Raises:
        ValueError: Not 14 non-negative integers
    """
    try:
        board = [int(part) for part in text.replace(" ", "").split(",") if part]
    except ValueError:
        raise ValueError(f"Board must be {BOARD_SIZE} comma separated integers") from None

    validate_board(board)
    return board


def _make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def play_game(
    first: ComputerPlayer,
    second: ComputerPlayer,
    state: Optional[GameState] = None,
) -> GameState:
    """
    Play one computer-vs-computer game to completion.

    Args:
        first: Player 1's move selector
        second: Player 2's move selector
        state: Starting state (default: fresh game)

    Returns:
        Final state
    """
    state = state or GameState.new()
    seats = {1: first, 2: second}

    while not state.game_over:
        mover = seats[state.current_player]
        pit = mover.select_move(state.board, state.current_player)
        state, _ = play_move(state, pit)

    return state


def play_command(args):
    """Play against the computer in the terminal."""
    setup_logging(args.log_level, args.rich_logs)
    logger = logging.getLogger(__name__)

    display = GameDisplay()
    human = args.human_player
    computer = ComputerPlayer(
        args.difficulty, rng=_make_rng(args.seed), depth=args.depth, workers=args.workers
    )
    state = GameState.new(
        player1_type=args.player1_type,
        player2_type="cat" if args.player1_type == "dog" else "dog",
    )

    logger.info(f"New game: you are player {human}, computer plays {computer.difficulty.value}")
    display.show_state(state)

    while not state.game_over:
        player = state.current_player
        if player == human:
            valid = get_valid_moves(state.board, player)
            try:
                answer = input(f"Your move {valid} (q to quit): ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                answer = "q"
            if answer in ("q", "quit"):
                display.log_info("Game abandoned")
                return
            try:
                pit = int(answer)
                state, result = play_move(state, pit)
            except (ValueError, MancalaError) as e:
                display.log_error(str(e))
                continue
        else:
            pit = computer.select_move(state.board, player)
            state, result = play_move(state, pit)

        display.show_move(player, pit, result)
        display.show_state(state, result)

    display.log_success(get_game_result(state.board))


def hint_command(args):
    """Show minimax values for every move on a given board."""
    setup_logging(args.log_level, args.rich_logs)

    board = parse_board(args.board)
    validate_player(args.player)

    scores = score_root_moves(board, args.player, depth=args.depth, workers=args.workers)
    # max keeps the first of equal values
    chosen = max(scores, key=lambda item: item[1])[0]

    display = GameDisplay()
    display.show_state(GameState(board=tuple(board), current_player=args.player))
    display.show_root_scores(scores, chosen)
    display.log_success(f"Suggested move: pit {chosen}")


def simulate_command(args):
    """Play computer-vs-computer games and tabulate results."""
    setup_logging(args.log_level, args.rich_logs)
    logger = logging.getLogger(__name__)

    rng = _make_rng(args.seed)
    first = ComputerPlayer(args.p1, rng=rng, depth=args.depth)
    second = ComputerPlayer(args.p2, rng=rng, depth=args.depth)

    logger.info(f"Simulating {args.games:,} games: {first.difficulty.value} vs {second.difficulty.value}")

    wins = {1: 0, 2: 0, None: 0}
    stones = {1: 0, 2: 0}

    for _ in tqdm(range(args.games), desc="Games", unit=" game"):
        final = play_game(first, second)
        wins[final.winner] += 1
        p1_score, p2_score = get_scores(final.board)
        stones[1] += p1_score
        stones[2] += p2_score

    GameDisplay().show_simulation_results(
        {1: first.difficulty.value, 2: second.difficulty.value}, wins, stones
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Mancala rules engine and computer opponent")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logs", action="store_true", help="Render log records with rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against the computer")
    play_parser.add_argument(
        "--difficulty", choices=DIFFICULTIES, default="medium", help="Computer difficulty"
    )
    play_parser.add_argument(
        "--human-player", type=int, choices=[1, 2], default=1, help="Seat you play (1 moves first)"
    )
    play_parser.add_argument(
        "--player1-type", choices=["dog", "cat"], default="dog", help="Player 1 skin"
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument(
        "--depth", type=int, default=SEARCH_DEPTH, help="Minimax depth for hard difficulty"
    )
    play_parser.add_argument(
        "--workers", type=int, default=None, help="Worker processes for hard root search"
    )
    play_parser.set_defaults(func=play_command)

    # Hint command
    hint_parser = subparsers.add_parser("hint", help="Score every move on a board")
    hint_parser.add_argument(
        "--board", required=True, help="14 comma separated stone counts"
    )
    hint_parser.add_argument("--player", type=int, choices=[1, 2], required=True)
    hint_parser.add_argument("--depth", type=int, default=SEARCH_DEPTH)
    hint_parser.add_argument("--workers", type=int, default=None)
    hint_parser.set_defaults(func=hint_command)

    # Simulate command
    sim_parser = subparsers.add_parser("simulate", help="Computer vs computer games")
    sim_parser.add_argument("--games", type=int, default=100, help="Number of games")
    sim_parser.add_argument("--p1", choices=DIFFICULTIES, default="easy")
    sim_parser.add_argument("--p2", choices=DIFFICULTIES, default="hard")
    sim_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    sim_parser.add_argument("--depth", type=int, default=SEARCH_DEPTH)
    sim_parser.set_defaults(func=simulate_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (MancalaError, ValueError) as e:
        GameDisplay().log_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
