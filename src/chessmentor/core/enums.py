"""Core enumerations for the chess domain.

String values double as the persisted JSON vocabulary, so they must not change.
"""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """Side color."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step (white moves up the board)."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self is Color.WHITE else 1

    def __str__(self) -> str:
        return self.value


class PieceType(str, Enum):
    """Chess piece types."""

    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"

    def __str__(self) -> str:
        return self.value


class GameStatus(str, Enum):
    """Status of a position from the point of view of the side to move."""

    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)

    def __str__(self) -> str:
        return self.value


class MoveRejection(str, Enum):
    """Why a requested move was not applied."""

    OUT_OF_BOUNDS = "out-of-bounds"
    NO_PIECE = "no-piece"
    WRONG_TURN = "wrong-turn"
    FRIENDLY_CAPTURE = "friendly-capture"
    ILLEGAL_GEOMETRY = "illegal-geometry"
    BLOCKED_PATH = "blocked-path"
    SELF_CHECK = "self-check"
    GAME_OVER = "game-over"

    def __str__(self) -> str:
        return self.value
