from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, List, Literal, Optional

from pydantic import Field, model_validator

from ..move import MoveData
from ..piece import Piece
from ..square import Offset, Square
from .base import (
    FIRST_MOVE_OPTION,
    AttributeInfo,
    InfoOption,
    OptionType,
    PieceAttributeBase,
    by_color,
    first_move_gate,
    squares_between,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..board import Board


class Jumping(PieceAttributeBase):
    """Single non-repeating step per direction (knight, king, pawn pushes)."""

    kind: Literal["jumping"] = "jumping"
    directions: List[Offset] = Field(default_factory=list)
    black_directions: Optional[List[Offset]] = None
    capture: bool = False
    capture_only: bool = False
    first_move_only: bool = False
    blockable: bool = False

    INFO: ClassVar[AttributeInfo] = AttributeInfo(
        name="Jumping",
        description="Can jump to any square in a given direction and capture enemy pieces (if configured).",
        example="Knight, King, and Pawn (single & double move)",
        options=[
            InfoOption(
                name="directions",
                description="The directions the piece can jump in.",
                optional=False,
                option_type=OptionType.OFFSET_LIST,
                example="Knight",
            ),
            InfoOption(
                name="black_directions",
                description="The directions the piece can jump in when black.",
                optional=True,
                option_type=OptionType.OFFSET_LIST,
                example="Pawn",
            ),
            InfoOption(
                name="capture",
                description="Can capture enemy pieces.",
                optional=False,
                option_type=OptionType.BOOL,
                example="Knight",
            ),
            InfoOption(
                name="capture_only",
                description="Can only capture enemy pieces. Capture must be true.",
                optional=False,
                option_type=OptionType.BOOL,
                example="Pawn",
            ),
            FIRST_MOVE_OPTION,
            InfoOption(
                name="blockable",
                description="Cannot jump over pieces: the squares between origin and target must be empty.",
                optional=True,
                option_type=OptionType.BOOL,
                example="Pawn (double move)",
            ),
        ],
    )

    @model_validator(mode="after")
    def _blockable_needs_straight_lines(self) -> "Jumping":
        if self.blockable:
            for direction in list(self.directions) + list(self.black_directions or []):
                df, dr = direction
                if df != 0 and dr != 0 and abs(df) != abs(dr):
                    raise ValueError(f"blockable jump {tuple(direction)} is not along a line")
        return self

    def generate_moves(self, board: "Board", piece: Piece) -> List[MoveData]:
        if not first_move_gate(board, piece, self.first_move_only):
            return []

        moves: List[MoveData] = []
        for direction in by_color(self.directions, self.black_directions, piece.color):
            to = piece.square.translate(direction)
            if to is None or not board.valid_square(to):
                continue
            if self.blockable and not self._path_clear(board, piece.square, to):
                continue
            occupant = board.occupant_color(to)
            if occupant is None:
                if not self.capture_only:
                    moves.append(MoveData(piece, to))
            elif occupant != piece.color and self.capture:
                moves.append(MoveData(piece, to, capture=to))
        return moves

    @staticmethod
    def _path_clear(board: "Board", origin: Square, to: Square) -> bool:
        return all(board.occupant_color(s) is None for s in squares_between(origin, to))

    def generate_attacks(self, board: "Board", piece: Piece) -> int:
        # Threat potential: occupancy of the target square does not matter.
        if not self.capture or not first_move_gate(board, piece, self.first_move_only):
            return 0

        attacks = 0
        for direction in by_color(self.directions, self.black_directions, piece.color):
            to = piece.square.translate(direction)
            if to is None or not board.valid_square(to):
                continue
            if self.blockable and not self._path_clear(board, piece.square, to):
                continue
            attacks |= 1 << board.square_to_index(to)
        return attacks
