"""GameState snapshot and state transitions.

A :class:`GameState` is never mutated: every accepted move produces a new
snapshot, so callers may keep old ones for history, undo and saving.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from chessmentor.core.board import Board
from chessmentor.core.enums import Color, GameStatus, MoveRejection
from chessmentor.core.errors import IllegalMoveError
from chessmentor.core.move import Move
from chessmentor.core.piece import Piece
from chessmentor.core.rules import Rules
from chessmentor.core.types import Square
from chessmentor.core.validator import check_move

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameState:
    """Board, side to move and the status of the position for that side."""

    board: Board
    current_player: Color = Color.WHITE
    status: GameStatus = GameStatus.ONGOING

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Tagged outcome of a move request.

    ``state`` is the new snapshot on success and the untouched input on
    rejection.
    """

    state: GameState
    move: Move
    rejection: MoveRejection | None = None
    captured: Piece | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    def unwrap(self) -> GameState:
        """Return the new state or raise :class:`IllegalMoveError`."""
        if self.rejection is not None:
            move = self.move
            raise IllegalMoveError(
                self.rejection,
                f"Illegal move {move.from_sq} -> {move.to_sq}: {self.rejection}",
            )
        return self.state


# ── Construction ─────────────────────────────────────────────────────────────


def initialize() -> GameState:
    """Standard starting position, white to move."""
    return GameState(Board.initial(), Color.WHITE, GameStatus.ONGOING)


def make_state(board: Board, current_player: Color = Color.WHITE) -> GameState:
    """Build a classified state for an externally constructed *board*.

    Raises :class:`InvariantError` unless each side has exactly one king and
    the side not to move is out of check.
    """
    Rules.validate_position(board, current_player)
    state = GameState(board, current_player)
    return replace(state, status=Rules.classify(state))


def classify(state: GameState) -> GameStatus:
    """Re-derive the status of *state* (e.g. for a loaded save)."""
    return Rules.classify(state)


# ── Transitions ──────────────────────────────────────────────────────────────


def try_move(state: GameState, from_sq: Square, to_sq: Square) -> MoveResult:
    """Validate and apply a move, reporting why it was rejected if it was."""
    move = Move(from_sq, to_sq)
    rejection = check_move(state, from_sq, to_sq)
    if rejection is None and Rules.leaves_king_in_check(
        state.board, state.current_player, move
    ):
        rejection = MoveRejection.SELF_CHECK
    if rejection is not None:
        _LOGGER.debug(
            "Rejected %s -> %s for %s: %s",
            from_sq,
            to_sq,
            state.current_player,
            rejection,
        )
        return MoveResult(state, move, rejection)

    captured = state.board[to_sq]
    board = state.board.with_move(move)
    next_state = GameState(board, state.current_player.opposite)
    next_state = replace(next_state, status=Rules.classify(next_state))
    return MoveResult(next_state, move, captured=captured)


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> GameState:
    """Apply a move, returning *state* itself when the move is illegal."""
    return try_move(state, from_sq, to_sq).state
