"""Command-line interface for the Sudoku engine."""

import argparse
import json
import logging
import sys
from typing import List

from tqdm import tqdm

from .core.board import SudokuBoard
from .puzzle import MAX_ATTEMPTS, UniquenessReducer, check_entries
from .solvers import BacktrackingSolver, count_solutions


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver, solution counter and uniqueness reducer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle
  python -m sudoku_engine.cli solve --puzzle "530070000600195000..."

  # Count the solutions of every puzzle in a file
  python -m sudoku_engine.cli count --file puzzles.txt

  # Turn an ambiguous puzzle into a single-solution one
  python -m sudoku_engine.cli unique --puzzle "060705104..." --seed 7
        """
    )
    parser.add_argument(
        "--log-level", default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve Sudoku puzzles")
    _add_input_arguments(solve_parser)
    solve_parser.add_argument(
        "--no-deduction", action="store_true",
        help="Skip the naked single and unique candidate passes"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Count command
    count_parser = subparsers.add_parser("count", help="Count the solutions of Sudoku puzzles")
    _add_input_arguments(count_parser)
    count_parser.add_argument(
        "--limit", "-l", type=_positive_int, default=None,
        help="Stop counting after this many solutions (default: count all)"
    )

    # Unique command
    unique_parser = subparsers.add_parser(
        "unique", help="Reveal clues until each puzzle has exactly one solution"
    )
    _add_input_arguments(unique_parser)
    unique_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    unique_parser.add_argument(
        "--max-attempts", type=int, default=MAX_ATTEMPTS,
        help=f"Maximum random cell picks per puzzle (default: {MAX_ATTEMPTS})"
    )
    unique_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for the reduced puzzles (JSON format)"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check entered values against the solution")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle givens (81 chars, 0 or . for empty cells)"
    )
    check_parser.add_argument(
        "--attempt", "-a", type=str, required=True,
        help="Givens plus entered values (81 chars)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "count":
        cmd_count(args)
    elif args.command == "unique":
        cmd_unique(args)
    elif args.command == "check":
        cmd_check(args)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _add_input_arguments(subparser):
    group = subparser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    group.add_argument(
        "--file", "-f", type=str,
        help="File with one puzzle string per line"
    )


def read_puzzle_file(path: str) -> List[str]:
    """Read puzzle strings from a file, skipping blank lines and # comments."""
    with open(path) as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def _load_boards(args) -> List[SudokuBoard]:
    sources = [args.puzzle] if args.puzzle else read_puzzle_file(args.file)
    try:
        return [SudokuBoard.from_string(s) for s in sources]
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)


def _progress(boards: List[SudokuBoard], desc: str):
    return tqdm(boards, desc=desc, disable=len(boards) < 2)


def cmd_solve(args):
    """Handle the solve command."""
    boards = _load_boards(args)

    for i, board in enumerate(_progress(boards, "Solving"), 1):
        solver = BacktrackingSolver(use_deduction=not args.no_deduction)
        solution, stats = solver.solve(board)

        print(f"\n--- Puzzle {i} ({board.count_filled()} clues) ---")
        print(board)
        if stats.solved:
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
            if args.verbose:
                print(f"  Naked singles: {stats.naked_singles}")
                print(f"  Unique candidates: {stats.unique_candidates}")
                print(f"  Nodes explored: {stats.nodes_explored:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
                print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            print(solution)
        else:
            print("✗ No solution")
            if args.verbose:
                print(f"  Time: {stats.time_seconds:.4f}s")
                print(f"  Nodes explored: {stats.nodes_explored:,}")


def cmd_count(args):
    """Handle the count command."""
    boards = _load_boards(args)

    for board in _progress(boards, "Counting"):
        count = count_solutions(board, limit=args.limit)
        print(f"{board.to_string()} {count}")


def cmd_unique(args):
    """Handle the unique command."""
    boards = _load_boards(args)
    reducer = UniquenessReducer(seed=args.seed, max_attempts=args.max_attempts)

    results = []
    failed = 0
    for board in _progress(boards, "Reducing"):
        reduced = reducer.make_unique(board)
        if not reducer.succeeded:
            failed += 1
        results.append({
            "puzzle": board.to_string(),
            "unique": reduced.to_string(),
            "solved": reducer.succeeded,
            "revealed": [list(cell) for cell in reducer.revealed],
            "clues": reduced.count_filled(),
        })

        print("\nInput:")
        print(board.format_rows())
        print("\nOutput:")
        print(reduced.format_rows())
        if not reducer.succeeded:
            print("✗ Could not reduce to a single solution")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nReduced puzzles saved to {args.output}")

    if failed:
        print(f"\n{failed} of {len(boards)} puzzles not reduced to a single solution")
        sys.exit(1)


def cmd_check(args):
    """Handle the check command."""
    try:
        puzzle = SudokuBoard.from_string(args.puzzle)
        attempt = SudokuBoard.from_string(args.attempt)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    results = check_entries(puzzle, attempt)
    if results is None:
        print("✗ The givens have no solution")
        sys.exit(1)

    for (row, col), correct in sorted(results.items()):
        mark = "correct" if correct else "wrong"
        print(f"({row}, {col}) = {attempt.get(row, col)}: {mark}")
    wrong = sum(1 for ok in results.values() if not ok)
    print(f"\n{len(results) - wrong} correct, {wrong} wrong")


if __name__ == "__main__":
    main()
