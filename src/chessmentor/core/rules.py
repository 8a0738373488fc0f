"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessmentor.core.enums import Color, GameStatus
from chessmentor.core.errors import InvariantError
from chessmentor.core.move import Move
from chessmentor.core.types import Square, all_squares
from chessmentor.core.validator import check_board_move

if TYPE_CHECKING:
    from chessmentor.core.board import Board
    from chessmentor.core.state import GameState


class Rules:
    """Static rule-checker that operates on boards and :class:`GameState`."""

    @staticmethod
    def is_king_in_check(board: Board, color: Color) -> bool:
        """Whether any opposing piece could move onto *color*'s king.

        Raises :class:`MissingKingError` when *color* has no king.
        """
        king_sq = board.king_square(color)
        for sq, piece in board.occupied():
            if piece.color == color:
                continue
            if check_board_move(board, piece.color, sq, king_sq) is None:
                return True
        return False

    @staticmethod
    def validate_position(board: Board, side_to_move: Color) -> None:
        """Raise unless *board* is a reachable setup for *side_to_move*.

        Each side needs exactly one king, and the side that just moved must
        not be in check.
        """
        board.validate_kings()
        if Rules.is_king_in_check(board, side_to_move.opposite):
            raise InvariantError(
                f"{side_to_move.opposite} king is in check with {side_to_move} to move"
            )

    @staticmethod
    def leaves_king_in_check(board: Board, color: Color, move: Move) -> bool:
        """Whether playing *move* would leave *color*'s king attacked."""
        return Rules.is_king_in_check(board.with_move(move), color)

    @staticmethod
    def pseudo_legal_moves(state: GameState) -> Iterator[Move]:
        """Validator-legal moves for the side to move (may self-check)."""
        board = state.board
        side = state.current_player
        targets = all_squares()
        for from_sq in board.pieces(side):
            for to_sq in targets:
                if check_board_move(board, side, from_sq, to_sq) is None:
                    yield Move(from_sq, to_sq)

    @staticmethod
    def legal_moves(state: GameState) -> list[Move]:
        """Moves for the side to move that do not leave its own king in check."""
        side = state.current_player
        return [
            move
            for move in Rules.pseudo_legal_moves(state)
            if not Rules.leaves_king_in_check(state.board, side, move)
        ]

    @staticmethod
    def legal_destinations(state: GameState, from_sq: Square) -> list[Square]:
        return [move.to_sq for move in Rules.legal_moves(state) if move.from_sq == from_sq]

    @staticmethod
    def has_legal_move(state: GameState) -> bool:
        side = state.current_player
        return any(
            not Rules.leaves_king_in_check(state.board, side, move)
            for move in Rules.pseudo_legal_moves(state)
        )

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return Rules.is_king_in_check(state.board, state.current_player)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        if not Rules.is_in_check(state):
            return False
        return not Rules.has_legal_move(state)

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        if Rules.is_in_check(state):
            return False
        return not Rules.has_legal_move(state)

    @staticmethod
    def classify(state: GameState) -> GameStatus:
        """Status of *state* from the point of view of its side to move."""
        in_check = Rules.is_in_check(state)
        has_move = Rules.has_legal_move(state)
        if in_check:
            return GameStatus.CHECK if has_move else GameStatus.CHECKMATE
        if not has_move:
            return GameStatus.STALEMATE
        return GameStatus.ONGOING
