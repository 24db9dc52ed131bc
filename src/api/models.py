"""
Wire models: the JSON the backend sends and receives.

These are the only place where the backend's string encodings ("BlackRook", "e4", "whiteChecked") are parsed.
Everything past this boundary works with the domain values in src/chess.
"""

from typing import Optional, Self, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.chess.board import BoardSnapshot, Move
from src.chess.pieces import Piece
from src.chess.square import NUMBER_OF_SQUARES, Square
from src.core.exceptions import PayloadError
from src.core.shared_types import Color, PieceType


def _validate_square_label(value: str) -> str:
    # Square.from_algebraic raises InvalidSquareError (a ValueError) -> pydantic reports a ValidationError
    Square.from_algebraic(value)
    return value


# --- REQUEST / RESPONSE MODELS ---
class MovePayload(BaseModel):
    """A move as the backend serializes it: {"from": "e2", "to": "e4", ...}"""

    model_config = ConfigDict(populate_by_name=True)

    from_square: str = Field(alias="from")
    to_square: str = Field(alias="to")
    takes: Optional[str] = None
    castling: bool = False
    en_passant: bool = False
    promotion: bool = False
    promote_to: Optional[PieceType] = None

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_label(value)

    @classmethod
    def from_move(cls, move: Move) -> Self:
        return cls(
            from_square=move.origin.to_algebraic(),
            to_square=move.destination.to_algebraic(),
            takes=move.takes.to_name() if move.takes else None,
            castling=move.castling,
            en_passant=move.en_passant,
            promotion=move.promotion,
            promote_to=move.promote_to,
        )

    def to_move(self) -> Move:
        return Move(
            origin=Square.from_algebraic(self.from_square),
            destination=Square.from_algebraic(self.to_square),
            takes=Piece.from_name(self.takes) if self.takes else None,
            castling=self.castling,
            en_passant=self.en_passant,
            promotion=self.promotion,
            promote_to=self.promote_to,
        )

    def to_wire(self) -> dict:
        """JSON body for submitting the move (backend's own field names, unset optionals left out)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PlacedPiecePayload(BaseModel):
    """Sparse board encoding: a piece that carries its own square."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    coord: str
    piece_type: PieceType
    color: Color

    @field_validator("coord")
    @classmethod
    def validate_coord(cls, value: str) -> str:
        return _validate_square_label(value)


class BoardPayload(BaseModel):
    """
    The board, as returned by 'fetch board' and pushed on every update.

    ---
    `pieces` comes in one of two forms:
    * dense: exactly 64 entries, piece name or null, index is the square's offset
    * sparse: only the occupied squares, each entry carrying its own `coord`
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    pieces: list[Optional[Union[PlacedPiecePayload, str]]]
    turn: Color
    white_checked: bool = False
    black_checked: bool = False
    winner: Optional[Color] = None

    def to_snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            pieces=self._board_pieces(),
            turn=self.turn,
            white_checked=self.white_checked,
            black_checked=self.black_checked,
            winner=self.winner,
        )

    def _board_pieces(self) -> tuple[Optional[Piece], ...]:
        placed = [entry for entry in self.pieces if isinstance(entry, PlacedPiecePayload)]

        if placed and len(placed) != len(self.pieces):
            raise PayloadError("Board mixes dense (by offset) and sparse (by coord) piece entries.")

        if self.pieces and not placed:
            if len(self.pieces) != NUMBER_OF_SQUARES:
                raise PayloadError(
                    f"Dense board must list {NUMBER_OF_SQUARES} squares, got {len(self.pieces)}."
                )
            return tuple(
                Piece.from_name(entry) if isinstance(entry, str) else None
                for entry in self.pieces
            )

        # sparse: an empty list is a board without any pieces
        board: list[Optional[Piece]] = [None] * NUMBER_OF_SQUARES
        for entry in placed:
            offset = Square.from_algebraic(entry.coord).to_offset()
            if board[offset] is not None:
                raise PayloadError(f"Two pieces placed on {entry.coord}.")
            board[offset] = Piece(entry.color, entry.piece_type)
        return tuple(board)
