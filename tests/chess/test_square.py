"""Unit tests for /src/chess/square.py"""

from string import ascii_lowercase

import pytest

from src.chess.square import (
    BOARD_DIMENSIONS,
    Square,
    from_xy,
    to_label,
    to_offset,
    to_xy,
)
from src.core.exceptions import InvalidSquareError


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to file 1, rank 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank
    assert square.to_algebraic() == notation


@pytest.mark.parametrize(
    "label, offset",
    [("a1", 0), ("b1", 1), ("h1", 7), ("a2", 8), ("e2", 12), ("e4", 28), ("a8", 56), ("h8", 63)],
)
def test_offsets_are_rank_major(label: str, offset: int) -> None:
    """a1 is the first entry of the board list, then along the 1st rank, then the 2nd rank, etc."""
    assert to_offset(label) == offset
    assert to_label(offset) == label


def test_offset_round_trip() -> None:
    for offset in range(64):
        assert to_offset(to_label(offset)) == offset


def test_xy_round_trip() -> None:
    for x in range(8):
        for y in range(8):
            assert to_xy(from_xy(x, y)) == (x, y)


def test_xy_is_zero_based() -> None:
    assert to_xy("a1") == (0, 0)
    assert to_xy("h8") == (7, 7)
    assert from_xy(4, 3) == "e4"


def test_offsets_cover_the_board_once() -> None:
    squares = [Square.from_offset(offset) for offset in range(BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1])]
    assert len(set(squares)) == len(squares)
    assert all(square.to_offset() == i for i, square in enumerate(squares))


@pytest.mark.parametrize("label", ["a9", "h0"])
def test_rank_outside_board_rejected_as_label(label: str) -> None:
    """The label itself is refused, before a Square is ever constructed"""
    with pytest.raises(InvalidSquareError, match="Cannot interpret"):
        Square.from_algebraic(label)


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        for rank in range(1, BOARD_DIMENSIONS[1] + 1):
            square = Square(file, rank)
            assert square.is_within_bounds()


@pytest.mark.parametrize("file, rank", [(0, 1), (1, 0), (9, 1), (1, 9), (-1, -1)])
def test_square_out_of_bounds(file: int, rank: int) -> None:
    """A square off the board cannot even be created"""
    with pytest.raises(InvalidSquareError):
        Square(file, rank)


@pytest.mark.parametrize("label", ["", "e", "e44", "i1", "a0", "a9", "E4", "4e", "e-"])
def test_invalid_labels(label: str) -> None:
    with pytest.raises(InvalidSquareError):
        to_offset(label)


@pytest.mark.parametrize("offset", [-1, 64, 100])
def test_invalid_offsets(offset: int) -> None:
    with pytest.raises(InvalidSquareError):
        to_label(offset)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_invalid_xy(x: int, y: int) -> None:
    with pytest.raises(InvalidSquareError):
        from_xy(x, y)


def test_invalid_square_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Square.from_algebraic("z9")


def test_str_is_the_label() -> None:
    assert str(Square(5, 4)) == "e4"
