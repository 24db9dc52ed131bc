"""Protocol for the game backend (the rule engine). The client only ever talks to it through these calls."""

from collections.abc import AsyncIterator
from typing import Protocol

from src.chess.board import BoardSnapshot, Move
from src.chess.square import Square


class GameBackend(Protocol):
    """Authoritative source of the board, legal moves and game outcome."""

    async def fetch_snapshot(self) -> BoardSnapshot:
        """Full current state of the board."""
        ...

    async def fetch_candidate_moves(self, square: Square) -> list[Move]:
        """Legal moves of the piece on `square` for the side to move. Empty list: nothing selectable there."""
        ...

    async def submit_move(self, move: Move) -> None:
        """Play a move previously returned by fetch_candidate_moves."""
        ...

    async def apply_position_string(self, text: str) -> None:
        """Replace the whole position with the one described by a FEN string."""
        ...

    async def undo_last_move(self) -> None:
        """Take back one ply."""
        ...

    def subscribe(self) -> AsyncIterator[BoardSnapshot]:
        """Board snapshots pushed by the backend, in delivery order."""
        ...
