"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessmentor.core import initialize, try_move, parse_move

    state = initialize()
    move = parse_move("e2e4")
    result = try_move(state, move.from_sq, move.to_sq)
    if result.ok:
        state = result.state
"""

from chessmentor.core.board import Board, board_from_strings
from chessmentor.core.enums import Color, GameStatus, MoveRejection, PieceType
from chessmentor.core.errors import (
    ChessError,
    IllegalMoveError,
    InvariantError,
    MissingKingError,
    NotationError,
    SerializationError,
)
from chessmentor.core.move import Move
from chessmentor.core.notation import (
    STARTING_PLACEMENT,
    parse_move,
    placement_from_string,
    placement_to_string,
)
from chessmentor.core.piece import Piece
from chessmentor.core.rules import Rules
from chessmentor.core.serialization import (
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)
from chessmentor.core.state import (
    GameState,
    MoveResult,
    apply_move,
    classify,
    initialize,
    make_state,
    try_move,
)
from chessmentor.core.types import Square, is_on_board, parse_square, square_name
from chessmentor.core.validator import check_move, is_legal_move

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveRejection",
    "PieceType",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "InvariantError",
    "MissingKingError",
    "NotationError",
    "SerializationError",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "MoveResult",
    "Piece",
    "Rules",
    "board_from_strings",
    # Operations
    "apply_move",
    "check_move",
    "classify",
    "initialize",
    "is_legal_move",
    "make_state",
    "try_move",
    # Notation / persistence
    "STARTING_PLACEMENT",
    "parse_move",
    "placement_from_string",
    "placement_to_string",
    "state_from_dict",
    "state_from_json",
    "state_to_dict",
    "state_to_json",
]
