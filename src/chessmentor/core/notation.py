"""Coordinate notation and FEN-style piece placement."""

from __future__ import annotations

from chessmentor.core.board import Board
from chessmentor.core.errors import NotationError
from chessmentor.core.move import Move
from chessmentor.core.piece import Piece
from chessmentor.core.types import parse_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def parse_move(text: str) -> Move:
    """Parse ``<from><to>`` coordinate notation, e.g. ``"e2e4"``.

    Raises :class:`NotationError` for anything that is not two squares.
    """
    if not isinstance(text, str):
        raise NotationError(f"Move must be a string, got {type(text).__name__}")
    cleaned = text.strip().lower()
    if len(cleaned) != 4:
        raise NotationError(f"Invalid move notation: {text!r}")
    try:
        return Move(parse_square(cleaned[:2]), parse_square(cleaned[2:]))
    except ValueError:
        raise NotationError(f"Invalid move notation: {text!r}") from None


def placement_to_string(board: Board) -> str:
    """FEN piece-placement field, rank 8 first."""
    ranks: list[str] = []
    for cells in board.rows:
        empty = 0
        text = ""
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)


def placement_from_string(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`."""
    ranks = placement.strip().split("/")
    if len(ranks) != 8:
        raise NotationError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    rows: list[list[Piece | None]] = []
    for rank_text in ranks:
        cells: list[Piece | None] = []
        for ch in rank_text:
            if ch in "12345678":
                cells.extend([None] * int(ch))
            elif ch.isdigit():
                raise NotationError(f"Invalid placement digit {ch!r}: {placement!r}")
            else:
                try:
                    cells.append(Piece.from_char(ch))
                except ValueError:
                    raise NotationError(
                        f"Invalid placement piece {ch!r}: {placement!r}"
                    ) from None
            if len(cells) > 8:
                raise NotationError(f"Invalid placement rank width: {placement!r}")
        if len(cells) != 8:
            raise NotationError(f"Invalid placement rank width: {placement!r}")
        rows.append(cells)
    return Board(rows)
