"""
A square on the board, and the conversions between its three encodings:

* label:  algebraic notation, 'a1' - 'h8'
* offset: index 0 - 63 into the flat piece list the backend sends
* (x, y): zero-based file / rank, (0, 0) - (7, 7)

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidSquareError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)
FILES = "abcdefgh"[: BOARD_DIMENSIONS[0]]
NUMBER_OF_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class Square:
    """
    file and rank are 1-based: a1 is Square(1, 1), h8 is Square(8, 8).

    ---
    NOTE: The offset encoding is rank-major (a1=0, b1=1, ..., h1=7, a2=8, ..., h8=63), same as the backend's own coordinates.
    Always go through to_offset / from_offset: never compute an index from a row/column position somewhere else.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not self.is_within_bounds():
            raise InvalidSquareError(
                f"Square (file={self.file}, rank={self.rank}) is not on the board."
            )

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        if len(sq) != 2 or sq[0] not in FILES or not "1" <= sq[1] <= str(BOARD_DIMENSIONS[1]):
            raise InvalidSquareError(f"Cannot interpret {sq!r} as a square label.")
        file = FILES.index(sq[0]) + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{FILES[self.file - 1]}{self.rank}"

    @classmethod
    def from_offset(cls, offset: int) -> Square:
        if not 0 <= offset < NUMBER_OF_SQUARES:
            raise InvalidSquareError(
                f"Offset {offset} outside 0 - {NUMBER_OF_SQUARES - 1}."
            )
        rank_idx, file_idx = divmod(offset, BOARD_DIMENSIONS[0])
        return cls(file_idx + 1, rank_idx + 1)

    def to_offset(self) -> int:
        return (self.rank - 1) * BOARD_DIMENSIONS[0] + (self.file - 1)

    @classmethod
    def from_xy(cls, x: int, y: int) -> Square:
        """x is the file index, y the rank index. Both start at zero."""
        return cls(x + 1, y + 1)

    def to_xy(self) -> tuple[int, int]:
        return self.file - 1, self.rank - 1

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    def __str__(self) -> str:
        return self.to_algebraic()


# --- Label based helpers (the strings that travel between backend and renderer) ---
def to_offset(label: str) -> int:
    return Square.from_algebraic(label).to_offset()


def to_label(offset: int) -> str:
    return Square.from_offset(offset).to_algebraic()


def to_xy(label: str) -> tuple[int, int]:
    return Square.from_algebraic(label).to_xy()


def from_xy(x: int, y: int) -> str:
    return Square.from_xy(x, y).to_algebraic()
