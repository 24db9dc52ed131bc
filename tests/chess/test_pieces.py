"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Piece
from src.core.exceptions import PayloadError
from src.core.shared_types import Color, PieceType


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(Color.WHITE, piece_type).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(Color.BLACK, piece_type).to_fen() == PIECE_TO_FEN[piece_type].lower()


@pytest.mark.parametrize(
    "name, color, piece_type",
    [
        ("BlackRook", Color.BLACK, PieceType.ROOK),
        ("WhitePawn", Color.WHITE, PieceType.PAWN),
        ("WhiteKnight", Color.WHITE, PieceType.KNIGHT),
        ("BlackKing", Color.BLACK, PieceType.KING),
    ],
)
def test_from_backend_name(name: str, color: Color, piece_type: PieceType) -> None:
    piece = Piece.from_name(name)
    assert piece == Piece(color, piece_type)
    assert piece.to_name() == name


@pytest.mark.parametrize("name", ["", "Rook", "blackRook", "BlackDragon", "Black Rook"])
def test_unknown_backend_name(name: str) -> None:
    with pytest.raises(PayloadError):
        Piece.from_name(name)


def test_unknown_fen_letter() -> None:
    with pytest.raises(PayloadError):
        Piece.from_fen("x")


def test_pieces_are_immutable() -> None:
    piece = Piece(Color.WHITE, PieceType.PAWN)
    with pytest.raises(AttributeError):
        piece.type = PieceType.QUEEN  # type: ignore[misc]
