"""Command-line interface for the terminal Sudoku game."""

import argparse
import json
import os
import sys

from .core.board import SudokuBoard
from .core.validator import has_unique_solution
from .game import GameSession, play, ask_difficulty
from .generator import SudokuGenerator, Difficulty
from .solvers import BacktrackingSolver


DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsudoku",
        description="Terminal Sudoku: play, generate and solve puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play a hard puzzle
  termsudoku play --difficulty hard

  # Generate 5 medium puzzles
  termsudoku generate --count 5 --difficulty medium

  # Solve a puzzle
  termsudoku solve --puzzle "530070000600195000..."

  # Profile generation cost and uniqueness rate
  termsudoku benchmark --puzzles 10 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    level_group = play_parser.add_mutually_exclusive_group()
    level_group.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES, default=None,
        help="Difficulty level (asked interactively if omitted)"
    )
    level_group.add_argument(
        "--level", "-l", type=int, default=None,
        help="Difficulty as menu level: 0 = easy, 1 = medium, 2 = hard"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES + ["all"],
        default="easy",
        help="Difficulty level (default: easy)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Profile puzzle generation per difficulty")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES + ["all"],
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "generate":
        cmd_generate(args)
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _difficulties(name: str):
    if name == "all":
        return list(Difficulty)
    return [Difficulty(name)]


def cmd_play(args):
    """Handle the play command."""
    if args.difficulty is not None:
        difficulty = Difficulty(args.difficulty)
    elif args.level is not None:
        difficulty = Difficulty.from_level(args.level)
        if difficulty is None:
            print("Invalid difficulty level. Choosing Easy by default.")
            difficulty = Difficulty.EASY
    else:
        difficulty = ask_difficulty()

    puzzle = SudokuGenerator(seed=args.seed).generate(difficulty)
    solved = play(GameSession(puzzle))
    sys.exit(0 if solved else 1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    all_puzzles = []

    for difficulty in _difficulties(args.difficulty):
        print(f"\nGenerating {args.count} {difficulty.value} puzzles...")
        puzzles = generator.generate_batch(args.count, difficulty, show_progress=args.count > 1)

        for i, puzzle in enumerate(puzzles, 1):
            all_puzzles.append({
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "clues": puzzle.count_filled()
            })

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            print(puzzle)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solver = BacktrackingSolver()
    solution, stats = solver.solve(board)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Calls: {stats.calls:,}")
            print(f"  Assignments: {stats.assignments:,} ({stats.undos:,} undone)")
            print(f"  Peak memory: {stats.peak_memory_bytes / 1024:.2f} KB")
            print(f"  Unique solution: {'yes' if has_unique_solution(board) else 'no'}")
        print(solution)
    else:
        print("✗ No solution exists")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Calls: {stats.calls:,}")
        sys.exit(1)

def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationProfile, Visualizer

    difficulties = _difficulties(args.difficulty)
    print(f"Profiling {args.puzzles} puzzles each for: "
          f"{', '.join(d.value for d in difficulties)}")

    profile = GenerationProfile(
        puzzles_per_difficulty=args.puzzles,
        difficulties=difficulties,
        seed=args.seed
    )
    records = profile.run()

    print("\n" + "=" * 60)
    for diff, stats in profile.get_summary().items():
        print(f"\n{diff.capitalize()} ({stats['cells_removed']} cells removed):")
        print(f"  Fill: {stats['fill_assignments']:,} assignments, "
              f"{stats['fill_undos']:,} undone, {stats['mean_fill_ms']:.1f} ms")
        print(f"  Removal: {stats['mean_removal_ms']:.3f} ms, "
              f"{stats['mean_resamples']:.1f} resamples (max {stats['max_resamples']})")
        print(f"  Unique solution: {stats['unique_rate']:.1f}%")

    profile.save(args.output)
    print(f"\nRecords saved to {args.output}")

    if not args.no_charts:
        charts = Visualizer(records, args.output).generate_all()
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")


if __name__ == "__main__":
    main()
