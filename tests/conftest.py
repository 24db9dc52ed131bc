"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Optional

import pytest

from src.chess.board import BoardSnapshot
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.config import ClientSettings
from src.core.shared_types import Color

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def snapshot_from_placement(
    placement: str,
    turn: Color = Color.WHITE,
    white_checked: bool = False,
    black_checked: bool = False,
    winner: Optional[Color] = None,
) -> BoardSnapshot:
    """
    Test helper: build a snapshot from the piece placement part of a FEN string.
    (The client itself never reads FEN: boards always come from the backend.)
    """
    pieces: list[Optional[Piece]] = [None] * (BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1])
    for rank_idx, fen_one_rank in enumerate(placement.split("/")):
        # FEN string is read from top rank (8th) to bottom rank (1st), a-file first
        rank = BOARD_DIMENSIONS[1] - rank_idx
        file = 1
        for character in fen_one_rank:
            if character.isalpha():
                pieces[Square(file, rank).to_offset()] = Piece.from_fen(character)
                file += 1
            else:
                file += int(character)
    return BoardSnapshot(
        pieces=tuple(pieces),
        turn=turn,
        white_checked=white_checked,
        black_checked=black_checked,
        winner=winner,
    )


@pytest.fixture
def starting_snapshot() -> BoardSnapshot:
    return snapshot_from_placement(STARTING_PLACEMENT)


@pytest.fixture
def settings() -> ClientSettings:
    """Settings independent of the environment / any .env file on the machine running the tests."""
    return ClientSettings(_env_file=None, backend_url="http://backend.test")
