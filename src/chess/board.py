"""
Board state as handed to us by the backend.

The client never changes a snapshot: every change on the backend arrives as a complete new BoardSnapshot.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.pieces import Piece
from src.chess.square import NUMBER_OF_SQUARES, Square
from src.core.exceptions import PayloadError
from src.core.shared_types import Color, PieceType


@dataclass(frozen=True)
class Move:
    """
    A move certified by the backend.

    ---
    NOTE: castling / en_passant / promotion / promote_to are the backend's bookkeeping.
    The client does not interpret them, it only hands them back unchanged when submitting the move.
    """

    origin: Square
    destination: Square
    takes: Optional[Piece] = None
    castling: bool = False
    en_passant: bool = False
    promotion: bool = False
    promote_to: Optional[PieceType] = None

    def __str__(self) -> str:
        return f"{self.origin}{self.destination}"


@dataclass(frozen=True)
class BoardSnapshot:
    """Complete description of the board at one instant. Index into `pieces` is the square's offset."""

    pieces: tuple[Optional[Piece], ...]
    turn: Color
    white_checked: bool = False
    black_checked: bool = False
    winner: Optional[Color] = None

    def __post_init__(self) -> None:
        if len(self.pieces) != NUMBER_OF_SQUARES:
            raise PayloadError(
                f"A board holds {NUMBER_OF_SQUARES} squares, got {len(self.pieces)} entries."
            )

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.pieces[square.to_offset()]

    @property
    def is_finished(self) -> bool:
        return self.winner is not None
