"""Move legality: per-piece geometry, occupancy and turn order.

The validator never asks whether a move leaves the mover's own king in check;
that composition lives in :mod:`chessmentor.core.rules`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessmentor.core.enums import Color, MoveRejection, PieceType
from chessmentor.core.piece import Piece
from chessmentor.core.types import Square, is_on_board

if TYPE_CHECKING:
    from chessmentor.core.board import Board
    from chessmentor.core.state import GameState

_PieceRule = Callable[["Board", Square, Square, Piece], "MoveRejection | None"]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Every square strictly between *from_sq* and *to_sq* is empty.

    Only meaningful for straight or diagonal lines.
    """
    dr = _sign(to_sq[0] - from_sq[0])
    dc = _sign(to_sq[1] - from_sq[1])
    row, col = from_sq[0] + dr, from_sq[1] + dc
    while (row, col) != to_sq:
        if board[(row, col)] is not None:
            return False
        row += dr
        col += dc
    return True


# ── Piece rules ──────────────────────────────────────────────────────────────


def _pawn(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRejection | None:
    direction = piece.color.pawn_direction
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    target = board[to_sq]

    if d_col == 0:
        if d_row == direction:
            return None if target is None else MoveRejection.BLOCKED_PATH
        if d_row == 2 * direction and from_sq[0] == piece.color.pawn_start_row:
            middle = (from_sq[0] + direction, from_sq[1])
            if board[middle] is None and target is None:
                return None
            return MoveRejection.BLOCKED_PATH
        return MoveRejection.ILLEGAL_GEOMETRY

    # Diagonal steps are captures only; no en passant.
    if abs(d_col) == 1 and d_row == direction and target is not None:
        return None
    return MoveRejection.ILLEGAL_GEOMETRY


def _rook(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRejection | None:
    if from_sq[0] != to_sq[0] and from_sq[1] != to_sq[1]:
        return MoveRejection.ILLEGAL_GEOMETRY
    return None if _path_clear(board, from_sq, to_sq) else MoveRejection.BLOCKED_PATH


def _knight(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRejection | None:
    deltas = {abs(to_sq[0] - from_sq[0]), abs(to_sq[1] - from_sq[1])}
    return None if deltas == {1, 2} else MoveRejection.ILLEGAL_GEOMETRY


def _bishop(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRejection | None:
    if abs(to_sq[0] - from_sq[0]) != abs(to_sq[1] - from_sq[1]):
        return MoveRejection.ILLEGAL_GEOMETRY
    return None if _path_clear(board, from_sq, to_sq) else MoveRejection.BLOCKED_PATH


def _queen(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRejection | None:
    straight = _rook(board, from_sq, to_sq, piece)
    if straight is None:
        return None
    diagonal = _bishop(board, from_sq, to_sq, piece)
    if diagonal is None:
        return None
    # Report a blocked line over a wrong shape.
    if MoveRejection.BLOCKED_PATH in (straight, diagonal):
        return MoveRejection.BLOCKED_PATH
    return MoveRejection.ILLEGAL_GEOMETRY


def _king(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRejection | None:
    if abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1:
        return None
    return MoveRejection.ILLEGAL_GEOMETRY


_RULES: dict[PieceType, _PieceRule] = {
    PieceType.PAWN: _pawn,
    PieceType.ROOK: _rook,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


# ── Public API ───────────────────────────────────────────────────────────────


def check_board_move(
    board: Board, side_to_move: Color, from_sq: Square, to_sq: Square
) -> MoveRejection | None:
    """Return why *side_to_move* may not play *from_sq* → *to_sq*, or ``None``."""
    if not (is_on_board(from_sq) and is_on_board(to_sq)):
        return MoveRejection.OUT_OF_BOUNDS

    piece = board[from_sq]
    if piece is None:
        return MoveRejection.NO_PIECE
    if piece.color != side_to_move:
        return MoveRejection.WRONG_TURN

    target = board[to_sq]
    if target is not None and target.color == piece.color:
        return MoveRejection.FRIENDLY_CAPTURE

    return _RULES[piece.piece_type](board, from_sq, to_sq, piece)


def check_move(state: GameState, from_sq: Square, to_sq: Square) -> MoveRejection | None:
    """Return why the move is not legal in *state*, or ``None`` if it is."""
    return check_board_move(state.board, state.current_player, from_sq, to_sq)


def is_legal_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    """Whether the move obeys turn order, occupancy and piece geometry."""
    return check_move(state, from_sq, to_sq) is None
