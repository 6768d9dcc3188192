import argparse
import os
import sys
from collections.abc import Sequence
from logging import basicConfig, getLogger

from sudogen.engine import MAX_GIVENS, MIN_GIVENS, new_game
from sudogen.engine.shuffle import SHUFFLE_ITERATIONS
from sudogen.grid import format_grid, parse_grid
from sudogen.oracle import count_solutions, solve

logger = getLogger(__name__)


def clamp_givens(givens: int) -> int:
    return max(MIN_GIVENS, min(MAX_GIVENS, givens))


def main(
    *,
    givens: int = 30,
    seed: int | None = None,
    strategy: str = "pattern",
    shuffle_iterations: int = SHUFFLE_ITERATIONS,
    show_solution: bool = False,
) -> None:
    wanted = clamp_givens(givens)
    if wanted != givens:
        logger.warning("Given count %d clamped to %d", givens, wanted)

    game = new_game(
        wanted, seed, strategy=strategy, shuffle_iterations=shuffle_iterations
    )
    if game.givens != wanted:
        logger.info("Got %d givens, %d were requested", game.givens, wanted)

    print(format_grid(game.start, newline="\n"))
    if show_solution:
        print()
        print(format_grid(game.solution, newline="\n"))


def check(text: str) -> int:
    grid = parse_grid(text)
    found = count_solutions(grid, limit=2)
    if found == 0:
        print("No solution.")
        return 1
    if found > 1:
        print("Multiple solutions.")
        return 1
    solved, _ = solve(grid)
    print("Unique solution:")
    print(format_grid(solved, newline="\n"))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudogen", description="Generate uniquely solvable Sudoku puzzles."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Generate a new puzzle.")
    new.add_argument(
        "--givens",
        type=int,
        default=30,
        help=f"Target number of givens ({MIN_GIVENS}-{MAX_GIVENS}).",
    )
    new.add_argument("--seed", type=int, help="Random seed for reproducibility.")
    new.add_argument("--strategy", choices=("pattern", "search"), default="pattern")
    new.add_argument(
        "--shuffle-iterations", type=int, default=SHUFFLE_ITERATIONS
    )
    new.add_argument("--show-solution", action="store_true")

    commands.add_parser("check", help="Read a grid from stdin and solve it.")
    return parser


def cli(argv: Sequence[str] | None = None) -> int:
    basicConfig(level=os.environ.get("SUDOGEN_LOG_LEVEL", "INFO"))
    args = _build_parser().parse_args(argv)

    if args.command == "check":
        try:
            return check(sys.stdin.read())
        except ValueError as e:
            logger.error("Invalid grid: %s", e)
            return 2

    main(
        givens=args.givens,
        seed=args.seed,
        strategy=args.strategy,
        shuffle_iterations=args.shuffle_iterations,
        show_solution=args.show_solution,
    )
    return 0
