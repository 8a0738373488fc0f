"""Plain JSON document form of a :class:`GameState`.

Shape::

    {
        "board": [[null | {"type": "pawn", "color": "white"}, ...8], ...8],
        "currentPlayer": "white",
        "status": "ongoing"
    }

Rows are stored rank 8 first, matching the in-memory ``(row, col)`` layout.
"""

from __future__ import annotations

import json
from typing import Any

from chessmentor.core.board import Board
from chessmentor.core.enums import Color, GameStatus, PieceType
from chessmentor.core.errors import SerializationError
from chessmentor.core.piece import Piece
from chessmentor.core.rules import Rules
from chessmentor.core.state import GameState


def _piece_to_dict(piece: Piece | None) -> dict[str, str] | None:
    if piece is None:
        return None
    return {"type": piece.piece_type.value, "color": piece.color.value}


def _piece_from_dict(data: Any) -> Piece | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise SerializationError(f"Square must be null or an object, got {data!r}")
    try:
        return Piece(PieceType(data["type"]), Color(data["color"]))
    except KeyError as exc:
        raise SerializationError(f"Piece is missing field {exc.args[0]!r}") from None
    except ValueError:
        raise SerializationError(f"Invalid piece: {data!r}") from None


def state_to_dict(state: GameState) -> dict[str, Any]:
    return {
        "board": [[_piece_to_dict(p) for p in row] for row in state.board.rows],
        "currentPlayer": state.current_player.value,
        "status": state.status.value,
    }


def state_from_dict(data: Any, *, reclassify: bool = False) -> GameState:
    """Rebuild a state from :func:`state_to_dict` output.

    The board must hold exactly one king per side and the side not to move
    must be out of check. With *reclassify* the stored status is ignored and
    recomputed from the position.
    """
    if not isinstance(data, dict):
        raise SerializationError("Game state document must be an object")

    try:
        raw_board = data["board"]
        raw_player = data["currentPlayer"]
        raw_status = data["status"]
    except KeyError as exc:
        raise SerializationError(f"Missing field {exc.args[0]!r}") from None

    if not isinstance(raw_board, list) or len(raw_board) != 8:
        raise SerializationError("Board must be a list of 8 rows")
    rows: list[list[Piece | None]] = []
    for raw_row in raw_board:
        if not isinstance(raw_row, list) or len(raw_row) != 8:
            raise SerializationError("Each board row must be a list of 8 squares")
        rows.append([_piece_from_dict(cell) for cell in raw_row])
    board = Board(rows)

    try:
        player = Color(raw_player)
    except ValueError:
        raise SerializationError(f"Invalid currentPlayer: {raw_player!r}") from None
    try:
        status = GameStatus(raw_status)
    except ValueError:
        raise SerializationError(f"Invalid status: {raw_status!r}") from None

    Rules.validate_position(board, player)
    state = GameState(board, player, status)
    if reclassify:
        state = GameState(board, player, Rules.classify(state))
    return state


def state_to_json(state: GameState, **kwargs: Any) -> str:
    return json.dumps(state_to_dict(state), **kwargs)


def state_from_json(text: str, *, reclassify: bool = False) -> GameState:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from None
    return state_from_dict(data, reclassify=reclassify)
