"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmentor.core.enums import Color, PieceType

# Lowercase letter and move-list glyph per piece type. White letters are
# uppercased; both sides share the same glyph.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_BY_LETTER: dict[str, PieceType] = {letter: pt for pt, letter in _LETTERS.items()}
_GLYPHS = dict(zip(_LETTERS, "♟♜♞♝♛♚"))


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece type owned by one side."""

    piece_type: PieceType
    color: Color

    def __str__(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color is Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of ``str(piece)``, e.g. ``'n'`` is a black knight."""
        piece_type = _BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(piece_type, Color.WHITE if char.isupper() else Color.BLACK)

    @property
    def symbol(self) -> str:
        return _GLYPHS[self.piece_type]
