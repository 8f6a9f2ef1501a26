"""Parsing of player input lines."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


class InvalidCommand(ValueError):
    """Raised when an input line is not a move, hint or undo request."""


@dataclass(frozen=True)
class MoveCommand:
    """A placement with 0-based coordinates."""
    row: int
    col: int
    digit: int


@dataclass(frozen=True)
class HintCommand:
    pass


@dataclass(frozen=True)
class UndoCommand:
    pass


Command = Union[MoveCommand, HintCommand, UndoCommand]


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Accepted forms:
        ``h`` / ``H``          request a hint
        ``u`` / ``U``          undo the last move
        ``row col digit``      1-based row and column, then the digit

    Range checks on the numbers are left to the game session.
    """
    tokens = line.split()
    if not tokens:
        raise InvalidCommand("empty input")

    head = tokens[0].lower()
    if head == "h" and len(tokens) == 1:
        return HintCommand()
    if head == "u" and len(tokens) == 1:
        return UndoCommand()

    if len(tokens) != 3:
        raise InvalidCommand(f"expected 'row col digit', got {line.strip()!r}")
    try:
        row, col, digit = (int(t) for t in tokens)
    except ValueError:
        raise InvalidCommand(f"not a number in {line.strip()!r}") from None

    return MoveCommand(row - 1, col - 1, digit)
