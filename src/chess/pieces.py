"""Defines the chess pieces as the client sees them: a side and a role, nothing more."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import PayloadError
from src.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Backend names: side followed by role, ex. "BlackRook", "WhitePawn"
NAME_TO_PIECE: dict[str, tuple[Color, PieceType]] = {
    f"{color.value}{piece_type.value}": (color, piece_type)
    for color in Color
    for piece_type in PieceType
}


@dataclass(frozen=True)
class Piece:
    color: Color
    type: PieceType

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Parse the backend's name of a piece ("BlackRook")"""
        if name not in NAME_TO_PIECE:
            raise PayloadError(f"Unknown piece: {name!r}")
        color, piece_type = NAME_TO_PIECE[name]
        return cls(color, piece_type)

    def to_name(self) -> str:
        return f"{self.color.value}{self.type.value}"

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character.lower() not in FEN_TO_PIECE:
            raise PayloadError(f"Unknown FEN piece letter: {character!r}")
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(color, piece_type)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )
