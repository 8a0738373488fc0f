"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from chessmentor.core.enums import Color, PieceType
from chessmentor.core.errors import InvariantError, MissingKingError
from chessmentor.core.move import Move
from chessmentor.core.piece import Piece
from chessmentor.core.types import Square, is_on_board

Row = tuple[Piece | None, ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 8x8 grid of optional pieces, addressed by ``(row, col)``.

    Every "mutation" returns a new board, so snapshots can be shared freely
    between history, persistence and the UI.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Piece | None]]) -> None:
        grid = tuple(tuple(row) for row in rows)
        if len(grid) != 8 or any(len(row) != 8 for row in grid):
            raise ValueError("Board must have 8 rows of 8 squares")
        self._rows: tuple[Row, ...] = grid

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls([None] * 8 for _ in range(8))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        for col, pt in enumerate(_BACK_RANK):
            rows[0][col] = Piece(pt, Color.BLACK)
            rows[1][col] = Piece(PieceType.PAWN, Color.BLACK)
            rows[6][col] = Piece(PieceType.PAWN, Color.WHITE)
            rows[7][col] = Piece(pt, Color.WHITE)
        return cls(rows)

    @classmethod
    def from_pieces(cls, placement: dict[Square, Piece]) -> Board:
        """Build a board from a sparse ``{square: piece}`` mapping."""
        rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        for (row, col), piece in placement.items():
            if not is_on_board((row, col)):
                raise ValueError(f"Square off the board: {(row, col)!r}")
            rows[row][col] = piece
        return cls(rows)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._rows[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for row, cells in enumerate(self._rows):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield (row, col), piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_squares(self, color: Color) -> list[Square]:
        king = Piece(PieceType.KING, color)
        return [sq for sq, piece in self.occupied() if piece == king]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color* (first found scanning row-major)."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        raise MissingKingError(f"No {color} king on board")

    def validate_kings(self) -> None:
        """Raise unless each color has exactly one king."""
        for color in Color:
            count = len(self.king_squares(color))
            if count == 0:
                raise MissingKingError(f"No {color} king on board")
            if count > 1:
                raise InvariantError(f"{count} {color} kings on board")

    # -- Copy-on-write ------------------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """Copy of the board with *sq* set to *piece*."""
        row, col = sq
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        rows = list(self._rows)
        cells = list(rows[row])
        cells[col] = piece
        rows[row] = tuple(cells)
        return Board(rows)

    def with_move(self, move: Move) -> Board:
        """Copy of the board with the piece moved; the destination is overwritten."""
        piece = self[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")
        rows = [list(cells) for cells in self._rows]
        to_row, to_col = move.to_sq
        from_row, from_col = move.from_sq
        rows[to_row][to_col] = piece
        rows[from_row][from_col] = None
        return Board(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, cells in enumerate(self._rows):
            marks = [str(p) if p else "." for p in cells]
            lines.append(f"{8 - row} {' '.join(marks)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)


def board_from_strings(ranks: Sequence[str]) -> Board:
    """Build a board from 8 strings of FEN piece chars and dots, rank 8 first.

    Handy for tests and hand-built positions::

        board_from_strings([
            "....k...",
            "........",
            ...
        ])
    """
    if len(ranks) != 8:
        raise ValueError("Need exactly 8 ranks")
    rows: list[list[Piece | None]] = []
    for text in ranks:
        if len(text) != 8:
            raise ValueError(f"Rank must be 8 characters wide: {text!r}")
        rows.append([None if ch == "." else Piece.from_char(ch) for ch in text])
    return Board(rows)
