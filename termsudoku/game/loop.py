"""Terminal game loop."""

from __future__ import annotations
import sys
from typing import TextIO

from .commands import parse_command, InvalidCommand, HintCommand, UndoCommand
from .session import GameSession
from ..generator import Difficulty


INTRO = """\
+-----------------------------------------------------+
|                 *   Sudoku Game  *                  |
+-----------------------------------------------------+
|                 Welcome to Sudoku!                  |
|   Fill in the empty cells with numbers from 1 to 9. |
|                                                     |
|        Make sure that no row, column, or 3x3 box    |
|             contains the same number twice.         |
|                                                     |
|     You have {minutes:>2} Minutes to solve the sudoku puzzle. |
|                                                     |
|                 Good luck and have fun!             |
+-----------------------------------------------------+
"""

PROMPT = (
    "Enter row, column, and number (1-9) separated by spaces, "
    "or enter 'h' for a hint, or enter 'u' to undo: "
)


def ask_difficulty(input_stream: TextIO = sys.stdin, output_stream: TextIO = sys.stdout) -> Difficulty:
    """Prompt for a level 0/1/2, falling back to easy on anything else."""
    output_stream.write("Select the difficulty level (0 = Easy, 1 = Medium, 2 = Hard): ")
    output_stream.flush()
    line = input_stream.readline()
    try:
        difficulty = Difficulty.from_level(int(line.strip()))
    except ValueError:
        difficulty = None
    if difficulty is None:
        print("Invalid difficulty level. Choosing Easy by default.", file=output_stream)
        difficulty = Difficulty.EASY
    return difficulty


def play(
    session: GameSession,
    input_stream: TextIO = sys.stdin,
    output_stream: TextIO = sys.stdout,
    intro: bool = True
) -> bool:
    """
    Run the game until the puzzle is solved or input runs out.

    Returns:
        True if the player completed the puzzle.
    """
    out = output_stream
    if intro:
        print(INTRO.format(minutes=int(session.time_limit // 60)), file=out)

    while True:
        print("Sudoku Puzzle:", file=out)
        print(session.board, file=out)
        print(f"Time Elapsed: {session.elapsed():.1f} seconds "
              f"(limit {session.time_limit:.0f})", file=out)
        print(f"Moves: {session.moves}", file=out)

        out.write(PROMPT)
        out.flush()
        line = input_stream.readline()
        if not line:
            print("\nGoodbye.", file=out)
            return False

        try:
            command = parse_command(line)
        except InvalidCommand:
            print("Invalid move! Try again.", file=out)
            continue

        if isinstance(command, HintCommand):
            hint = session.hint()
            if hint is None:
                print("No valid hint available.", file=out)
            else:
                print(f"Hint: Try placing the number {hint.digit} in row "
                      f"{hint.row + 1}, column {hint.col + 1}.", file=out)
            continue

        if isinstance(command, UndoCommand):
            if session.undo() is None:
                print("Nothing to undo.", file=out)
            else:
                print("You undid your last move", file=out)
            continue

        result = session.place(command.row, command.col, command.digit)
        if not result.accepted:
            print("Invalid move! Try again.", file=out)
            continue

        if result.solved:
            print(session.board, file=out)
            print("Congratulations! You solved the Sudoku puzzle.", file=out)
            print(f"Total time taken: {session.elapsed():.1f} seconds", file=out)
            print(f"Total moves: {session.moves}", file=out)
            return True
