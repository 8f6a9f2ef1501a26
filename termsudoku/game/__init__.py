"""Interactive terminal game built on the generator and validity checks."""

from .session import GameSession, MoveResult, Hint, TIME_LIMIT_SECONDS
from .commands import parse_command, InvalidCommand, MoveCommand, HintCommand, UndoCommand
from .loop import play, ask_difficulty

__all__ = [
    "GameSession",
    "MoveResult",
    "Hint",
    "TIME_LIMIT_SECONDS",
    "parse_command",
    "InvalidCommand",
    "MoveCommand",
    "HintCommand",
    "UndoCommand",
    "play",
    "ask_difficulty",
]
