"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from chessmentor.core.board import board_from_strings
from chessmentor.core.enums import Color
from chessmentor.core.state import GameState, initialize, make_state


@pytest.fixture
def start() -> GameState:
    return initialize()


@pytest.fixture
def position() -> Callable[..., GameState]:
    """Build a classified state from 8 rank strings (rank 8 first)."""

    def _build(ranks: Sequence[str], to_move: Color = Color.WHITE) -> GameState:
        return make_state(board_from_strings(ranks), to_move)

    return _build


@pytest.fixture
def raw_position() -> Callable[..., GameState]:
    """Build an unclassified, unvalidated state (kings optional)."""

    def _build(ranks: Sequence[str], to_move: Color = Color.WHITE) -> GameState:
        return GameState(board_from_strings(ranks), to_move)

    return _build
