"""Implementation of GameBackend over HTTP using httpx (REST commands + a server-sent events stream for push updates)"""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any, Optional, Self

import httpx
from pydantic import TypeAdapter, ValidationError

from src.api.models import BoardPayload, MovePayload
from src.chess.board import BoardSnapshot, Move
from src.chess.square import Square
from src.core.config import ClientSettings
from src.core.exceptions import (
    BackendUnavailableError,
    CommandRejectedError,
    PayloadError,
)

logger = logging.getLogger(__name__)

MOVE_LIST_ADAPTER = TypeAdapter(list[MovePayload])


@dataclass(frozen=True)
class ServerSentEvent:
    event: str
    data: str


async def iter_server_sent_events(
    lines: AsyncIterator[str],
) -> AsyncIterator[ServerSentEvent]:
    """
    Group the lines of a text/event-stream into events.

    ---
    * a blank line ends an event
    * lines starting with ':' are comments (keep-alives)
    * several 'data:' lines are joined with newlines
    * an event without 'event:' field is called "message"
    """
    event_name = "message"
    data_lines: list[str] = []
    async for line in lines:
        if not line:
            if data_lines:
                yield ServerSentEvent(event_name, "\n".join(data_lines))
            event_name = "message"
            data_lines = []
            continue

        if line.startswith(":"):
            continue

        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if field == "event":
            event_name = value
        elif field == "data":
            data_lines.append(value)
    # NOTE: an event still being collected when the stream closes is incomplete and gets dropped


class HTTPGameBackend:
    """Backend reached through its HTTP API."""

    def __init__(
        self, settings: ClientSettings, client: Optional[httpx.AsyncClient] = None
    ) -> None:
        self.settings = settings
        self.client = client or httpx.AsyncClient(
            base_url=settings.backend_url, timeout=settings.request_timeout
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    # -- Commands --
    async def fetch_snapshot(self) -> BoardSnapshot:
        response = await self._request("GET", self.settings.board_path)
        return _parse_board(_json(response))

    async def fetch_candidate_moves(self, square: Square) -> list[Move]:
        response = await self._request(
            "GET", self.settings.moves_path, params={"coord": square.to_algebraic()}
        )
        try:
            payloads = MOVE_LIST_ADAPTER.validate_python(_json(response))
        except ValidationError as err:
            raise PayloadError(f"Invalid move list for {square}: {err}") from err
        return [payload.to_move() for payload in payloads]

    async def submit_move(self, move: Move) -> None:
        await self._request(
            "POST", self.settings.moves_path, json=MovePayload.from_move(move).to_wire()
        )

    async def apply_position_string(self, text: str) -> None:
        await self._request("POST", self.settings.fen_path, json={"fen": text})

    async def undo_last_move(self) -> None:
        await self._request("POST", self.settings.undo_path)

    # -- Push channel --
    async def subscribe(self) -> AsyncIterator[BoardSnapshot]:
        """Listen to the event stream, yielding a snapshot per update event. Ends when the backend closes the stream."""
        # reads may block for as long as nothing happens on the board
        timeout = httpx.Timeout(self.settings.request_timeout, read=None)
        try:
            async with self.client.stream(
                "GET",
                self.settings.events_path,
                headers={"Accept": "text/event-stream"},
                timeout=timeout,
            ) as response:
                if response.is_error:
                    await response.aread()
                    raise CommandRejectedError(
                        response.status_code, _error_detail(response)
                    )
                logger.info("Subscribed to %s", self.settings.events_path)

                async for event in iter_server_sent_events(response.aiter_lines()):
                    if event.event != self.settings.update_event:
                        logger.debug("Ignoring %r event", event.event)
                        continue
                    yield _parse_board_json(event.data)
        except httpx.TransportError as err:
            logger.warning("Update stream lost: %s", err)
            raise BackendUnavailableError(f"Update stream failed: {err}") from err

    # -- Internal helpers --
    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request. Translate transport problems and error statuses into the client's exceptions."""
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TransportError as err:
            logger.warning("%s %s failed: %s", method, path, err)
            raise BackendUnavailableError(f"{method} {path} failed: {err}") from err

        if response.is_error:
            detail = _error_detail(response)
            logger.warning(
                "%s %s rejected (%s): %s", method, path, response.status_code, detail
            )
            raise CommandRejectedError(response.status_code, detail)
        return response


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as err:
        raise PayloadError(f"Backend did not answer with JSON: {response.text!r}") from err


def _error_detail(response: httpx.Response) -> str:
    """Error responses carry either {"detail": ...} or a plain message."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


def _parse_board(data: Any) -> BoardSnapshot:
    try:
        payload = BoardPayload.model_validate(data)
    except ValidationError as err:
        raise PayloadError(f"Invalid board payload: {err}") from err
    return payload.to_snapshot()


def _parse_board_json(text: str) -> BoardSnapshot:
    try:
        payload = BoardPayload.model_validate_json(text)
    except ValidationError as err:
        raise PayloadError(f"Invalid board payload: {err}") from err
    return payload.to_snapshot()
