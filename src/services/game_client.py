"""
Orchestration of user clicks against the backend: the selection state machine of the board client.

The client owns one piece of mutable state, a ClientState value (current selection + last known board).
It is only ever replaced as a whole, through `_transition`. A click only changes it after the backend call behind it succeeded.
The backend is the single source of truth: moves are never computed or validated here, and a played move
only shows up on the board once the backend sends the new snapshot.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Optional

from src.backend.protocol import GameBackend
from src.chess.board import BoardSnapshot, Move
from src.chess.render import BoardView, build_rows, build_view, format_rows
from src.chess.square import Square
from src.core.config import ClientSettings, get_settings
from src.core.shared_types import Color

logger = logging.getLogger(__name__)

RenderCallback = Callable[[BoardView], None]
GameOverCallback = Callable[[Color], None]


# --- Selection states ---
@dataclass(frozen=True)
class Idle:
    """Nothing selected, nothing highlighted."""


@dataclass(frozen=True)
class Selected:
    """A square is selected, together with the backend's answer of where it may move to."""

    origin: Square
    candidates: tuple[Move, ...]

    def move_to(self, destination: Square) -> Optional[Move]:
        return next(
            (move for move in self.candidates if move.destination == destination),
            None,
        )

    @property
    def destinations(self) -> frozenset[Square]:
        return frozenset(move.destination for move in self.candidates)


SelectionState = Idle | Selected

IDLE = Idle()


@dataclass(frozen=True)
class ClientState:
    selection: SelectionState = IDLE
    snapshot: Optional[BoardSnapshot] = None


class GameClient:
    """Selection / move state machine, synchronized with the backend."""

    def __init__(
        self,
        backend: GameBackend,
        settings: Optional[ClientSettings] = None,
        on_render: Optional[RenderCallback] = None,
        on_game_over: Optional[GameOverCallback] = None,
    ) -> None:
        self.backend = backend
        self.settings = settings or get_settings()
        self.on_render = on_render
        self.on_game_over = on_game_over
        self._state = ClientState()

    # -- Read access --
    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def selection(self) -> SelectionState:
        return self._state.selection

    @property
    def snapshot(self) -> Optional[BoardSnapshot]:
        return self._state.snapshot

    def view(self) -> Optional[BoardView]:
        """Grid for the current render pass, or None while no board has been received yet."""
        snapshot = self._state.snapshot
        if snapshot is None:
            return None
        selection = self._state.selection
        if isinstance(selection, Selected):
            return build_view(snapshot, selection.origin, selection.destinations)
        return build_view(snapshot)

    # -- Board synchronization --
    async def start(self) -> None:
        """Initial fetch of the board."""
        await self.refresh()

    async def refresh(self) -> None:
        """Fetch the full board from the backend and present it."""
        snapshot = await self.backend.fetch_snapshot()
        self.apply_snapshot(snapshot)

    def apply_snapshot(self, snapshot: BoardSnapshot) -> None:
        """
        Present a new board. Used for pushed updates as well as fetched boards.

        ---
        Always wins over whatever board was shown before (last write wins). The selection is left alone.
        """
        previous = self._state.snapshot
        self._transition(snapshot=snapshot)

        if snapshot.is_finished and (previous is None or not previous.is_finished):
            logger.info("Game over, winner: %s", snapshot.winner)
            if self.on_game_over:
                self.on_game_over(snapshot.winner)

    async def consume_updates(self) -> None:
        """Apply every snapshot the backend pushes, until the subscription ends."""
        async for snapshot in self.backend.subscribe():
            logger.debug("Pushed update received (%s to move)", snapshot.turn)
            self.apply_snapshot(snapshot)

    # -- User input --
    async def click(self, label: Square | str) -> None:
        """
        The click-intent callback for the renderer.

        ---
        Idle:
            ask the backend for the moves from the clicked square, select it if there are any.
        Selected:
            * click on the selected square again: deselect
            * click on one of the highlighted destinations: play that move
            * click anywhere else: start over with the clicked square (same as from Idle)

        If a backend call fails, its exception propagates and the state stays as it was before the click.
        """
        square = label if isinstance(label, Square) else Square.from_algebraic(label)
        selection = self._state.selection

        if isinstance(selection, Selected):
            if square == selection.origin:
                logger.debug("Deselected %s", square)
                self._transition(selection=IDLE)
                return

            move = selection.move_to(square)
            if move is not None:
                await self._play(move)
                return

        await self._select(square)

    async def apply_position_string(self, text: str) -> None:
        """Replace the position on the backend by the one in the FEN string. The selection is dropped either way."""
        self._transition(selection=IDLE)
        await self.backend.apply_position_string(text)
        logger.info("Position set to %r", text)
        await self._refresh_after_command()

    async def undo_last_move(self) -> None:
        """Take back the last ply. The selection is dropped either way."""
        self._transition(selection=IDLE)
        await self.backend.undo_last_move()
        logger.info("Last move undone")
        await self._refresh_after_command()

    # -- Internal helpers --
    async def _select(self, square: Square) -> None:
        candidates = await self.backend.fetch_candidate_moves(square)
        if not candidates:
            logger.debug("No moves from %s", square)
            self._transition(selection=IDLE)
            return

        logger.debug(
            "Selected %s, destinations: %s",
            square,
            ", ".join(str(move.destination) for move in candidates),
        )
        self._transition(selection=Selected(square, tuple(candidates)))

    async def _play(self, move: Move) -> None:
        await self.backend.submit_move(move)
        logger.info("Played %s", move)
        self._transition(selection=IDLE)
        await self._refresh_after_command()

    async def _refresh_after_command(self) -> None:
        if self.settings.refresh_after_command:
            await self.refresh()

    def _transition(self, **changes: object) -> None:
        """
        The single place where state changes.

        Changes are applied to the state as it is *now*: a snapshot pushed while a click was waiting on the backend is kept.
        """
        self._state = replace(self._state, **changes)
        self._render()

    def _render(self) -> None:
        view = self.view()
        if view is None:
            return
        if logger.isEnabledFor(logging.DEBUG) and self._state.snapshot is not None:
            logger.debug("Board:\n%s", format_rows(build_rows(self._state.snapshot)))
        if self.on_render:
            self.on_render(view)
