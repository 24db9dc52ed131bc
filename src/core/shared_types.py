"""
Type definitions used across layers

(Values are the spellings the backend uses on the wire, ex. "White", "Rook")
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "White"
    BLACK = "Black"


class PieceType(StrEnum):
    PAWN = "Pawn"
    KNIGHT = "Knight"
    BISHOP = "Bishop"
    ROOK = "Rook"
    QUEEN = "Queen"
    KING = "King"
