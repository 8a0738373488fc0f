"""Square type alias and coordinate helpers.

Board layout (row-major, white at the bottom):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

so ``(6, 4)`` is e2 and ``(0, 3)`` is d8.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

FILES = "abcdefgh"
RANKS = "12345678"


def is_on_board(sq: Square) -> bool:
    """Check whether both coordinates lie in 0–7."""
    row, col = sq
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    if not is_on_board(sq):
        raise ValueError(f"Square off the board: {sq!r}")
    return FILES[col] + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), FILES.index(name[0]))


def all_squares() -> list[Square]:
    """Every square in row-major order."""
    return [(row, col) for row in range(8) for col in range(8)]
