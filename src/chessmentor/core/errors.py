"""Exception hierarchy for the chess domain.

Every error is local and recoverable: callers re-prompt for a move, reject an
advisor suggestion, or refuse to load a corrupt save.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmentor.core.enums import MoveRejection


class ChessError(Exception):
    """Base class for all chessmentor errors."""


class NotationError(ChessError, ValueError):
    """Malformed coordinate notation (e.g. from an advisor reply)."""


class SerializationError(ChessError, ValueError):
    """A persisted document does not describe a game state."""


class InvariantError(ChessError):
    """A position breaks a board invariant (one king per color)."""


class MissingKingError(InvariantError):
    """The board has no king of the requested color."""


class IllegalMoveError(ChessError):
    """A requested move was rejected."""

    def __init__(self, reason: MoveRejection, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or f"Illegal move: {reason}")
