"""Tests for the JSON document form of GameState."""

import json

import pytest

from chessmentor.core.board import Board, board_from_strings
from chessmentor.core.enums import Color, GameStatus, PieceType
from chessmentor.core.errors import InvariantError, MissingKingError, SerializationError
from chessmentor.core.piece import Piece
from chessmentor.core.serialization import (
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)
from chessmentor.core.state import GameState, apply_move, initialize


class TestToDict:
    def test_shape(self, start) -> None:
        data = state_to_dict(start)
        assert set(data) == {"board", "currentPlayer", "status"}
        assert data["currentPlayer"] == "white"
        assert data["status"] == "ongoing"
        assert len(data["board"]) == 8
        assert all(len(row) == 8 for row in data["board"])
        assert data["board"][0][4] == {"type": "king", "color": "black"}
        assert data["board"][6][0] == {"type": "pawn", "color": "white"}
        assert data["board"][4][4] is None

    def test_json_is_plain(self, start) -> None:
        assert json.loads(state_to_json(start)) == state_to_dict(start)


class TestRoundTrip:
    def test_initial(self, start) -> None:
        assert state_from_dict(state_to_dict(start)) == start

    def test_after_moves(self, start) -> None:
        state = apply_move(start, (6, 5), (5, 5))
        state = apply_move(state, (1, 4), (3, 4))
        state = apply_move(state, (6, 6), (4, 6))
        state = apply_move(state, (0, 3), (4, 7))
        assert state.status == GameStatus.CHECKMATE
        assert state_from_json(state_to_json(state)) == state

    def test_stored_status_kept(self, start) -> None:
        data = state_to_dict(start)
        data["status"] = "check"
        assert state_from_dict(data).status == GameStatus.CHECK

    def test_reclassify(self, start) -> None:
        data = state_to_dict(start)
        data["status"] = "checkmate"
        assert state_from_dict(data, reclassify=True).status == GameStatus.ONGOING


class TestInvalidDocuments:
    def test_not_an_object(self) -> None:
        with pytest.raises(SerializationError):
            state_from_dict([1, 2, 3])

    @pytest.mark.parametrize("field", ["board", "currentPlayer", "status"])
    def test_missing_field(self, start, field) -> None:
        data = state_to_dict(start)
        del data[field]
        with pytest.raises(SerializationError):
            state_from_dict(data)

    def test_bad_color(self, start) -> None:
        data = state_to_dict(start)
        data["currentPlayer"] = "red"
        with pytest.raises(SerializationError):
            state_from_dict(data)

    def test_bad_status(self, start) -> None:
        data = state_to_dict(start)
        data["status"] = "resigned"
        with pytest.raises(SerializationError):
            state_from_dict(data)

    def test_short_board(self, start) -> None:
        data = state_to_dict(start)
        data["board"] = data["board"][:7]
        with pytest.raises(SerializationError):
            state_from_dict(data)

    def test_bad_piece(self, start) -> None:
        data = state_to_dict(start)
        data["board"][4][4] = {"type": "archbishop", "color": "white"}
        with pytest.raises(SerializationError):
            state_from_dict(data)

    def test_piece_missing_field(self, start) -> None:
        data = state_to_dict(start)
        data["board"][4][4] = {"type": "rook"}
        with pytest.raises(SerializationError):
            state_from_dict(data)

    def test_missing_king(self, start) -> None:
        data = state_to_dict(start)
        data["board"][7][4] = None
        with pytest.raises(MissingKingError):
            state_from_dict(data)

    def test_two_kings(self) -> None:
        board = Board.initial().with_piece((4, 4), Piece(PieceType.KING, Color.WHITE))
        data = state_to_dict(GameState(board))
        with pytest.raises(InvariantError):
            state_from_dict(data)

    def test_side_not_to_move_in_check(self) -> None:
        board = board_from_strings(["....k..."] + ["........"] * 6 + ["K...R..."])
        data = state_to_dict(GameState(board, Color.WHITE))
        with pytest.raises(InvariantError):
            state_from_dict(data)
        with pytest.raises(InvariantError):
            state_from_dict(data, reclassify=True)

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError):
            state_from_json("{not json")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            state_from_json("[]")


def test_initialize_round_trip_through_text() -> None:
    text = state_to_json(initialize(), indent=2)
    assert state_from_json(text) == initialize()
