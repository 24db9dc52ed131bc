"""
Render model: turn a BoardSnapshot into the 8x8 grid a presentation layer draws.

Rows come out top-to-bottom as seen by White (rank 8 first), squares left-to-right (a-file first).
Everything here is pure; throw the result away and rebuild it whenever the snapshot changes.
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import Optional

from src.chess.board import BoardSnapshot
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, FILES, Square
from src.core.shared_types import Color

EMPTY_SQUARE_CHARACTER = "."


@dataclass(frozen=True)
class RenderSquare:
    square: Square
    piece: Optional[Piece]


@dataclass(frozen=True)
class RenderRow:
    rank: int
    squares: tuple[RenderSquare, ...]


@dataclass(frozen=True)
class SquareView:
    """One square of a render pass, with the highlights of the current selection."""

    square: Square
    piece: Optional[Piece]
    is_selected: bool
    is_candidate: bool

    @property
    def label(self) -> str:
        return self.square.to_algebraic()


@dataclass(frozen=True)
class BoardView:
    rows: tuple[tuple[SquareView, ...], ...]
    turn: Color
    white_checked: bool
    black_checked: bool
    winner: Optional[Color]


def build_rows(snapshot: BoardSnapshot) -> list[RenderRow]:
    """Build the grid: 8 rows from rank 8 down to rank 1, each holding the a - h squares."""
    rows: list[RenderRow] = []
    for y in range(BOARD_DIMENSIONS[1]):
        squares = []
        for x in range(BOARD_DIMENSIONS[0]):
            # resolve the piece through the square's offset, not through the loop position
            square = Square.from_xy(x, y)
            squares.append(RenderSquare(square, snapshot.piece_at(square)))
        rows.append(RenderRow(rank=y + 1, squares=tuple(squares)))

    # ranks were built bottom-up, display is top-down
    rows.sort(key=lambda row: row.rank, reverse=True)
    return rows


def build_view(
    snapshot: BoardSnapshot,
    selected: Optional[Square] = None,
    destinations: Collection[Square] = (),
) -> BoardView:
    """The grid of `build_rows`, with selected / candidate flags and the snapshot's metadata."""
    rows = tuple(
        tuple(
            SquareView(
                square=render_square.square,
                piece=render_square.piece,
                is_selected=render_square.square == selected,
                is_candidate=render_square.square in destinations,
            )
            for render_square in row.squares
        )
        for row in build_rows(snapshot)
    )
    return BoardView(
        rows=rows,
        turn=snapshot.turn,
        white_checked=snapshot.white_checked,
        black_checked=snapshot.black_checked,
        winner=snapshot.winner,
    )


def format_rows(rows: list[RenderRow]) -> str:
    """Plain text dump of the grid (FEN letters, '.' for empty squares), handy in logs."""
    lines = [
        f"{row.rank} "
        + " ".join(
            sq.piece.to_fen() if sq.piece else EMPTY_SQUARE_CHARACTER
            for sq in row.squares
        )
        for row in rows
    ]
    lines.append("  " + " ".join(FILES))
    return "\n".join(lines)
