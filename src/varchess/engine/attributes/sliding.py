from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, List, Literal, Optional

from pydantic import Field

from ..move import MoveData
from ..piece import Piece
from ..square import Offset
from .base import (
    FIRST_MOVE_OPTION,
    AttributeInfo,
    InfoOption,
    OptionType,
    PieceAttributeBase,
    by_color,
    first_move_gate,
    walk,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..board import Board


class Sliding(PieceAttributeBase):
    """Repeated movement along each direction until blocked (bishop, rook, queen)."""

    kind: Literal["sliding"] = "sliding"
    directions: List[Offset] = Field(default_factory=list)
    black_directions: Optional[List[Offset]] = None
    capture: bool = False
    first_move_only: bool = False

    INFO: ClassVar[AttributeInfo] = AttributeInfo(
        name="Sliding",
        description="Can move infinitely in a given direction as long as it is not occupied.",
        example="Bishop, rook, queen",
        options=[
            InfoOption(
                name="directions",
                description="The directions the piece can move in.",
                optional=False,
                option_type=OptionType.OFFSET_LIST,
                example="Bishop, rook, queen",
            ),
            InfoOption(
                name="black_directions",
                description="The directions the piece can move in when it is black.",
                optional=True,
                option_type=OptionType.OFFSET_LIST,
                example="Bishop, rook, queen",
            ),
            InfoOption(
                name="capture",
                description="Can capture enemy pieces at the end of the slide.",
                optional=False,
                option_type=OptionType.BOOL,
                example="Bishop, rook, and queen",
            ),
            FIRST_MOVE_OPTION,
        ],
    )

    def generate_moves(self, board: "Board", piece: Piece) -> List[MoveData]:
        if not first_move_gate(board, piece, self.first_move_only):
            return []

        moves: List[MoveData] = []
        for direction in by_color(self.directions, self.black_directions, piece.color):
            for to in walk(board, piece.square, direction):
                occupant = board.occupant_color(to)
                if occupant is None:
                    moves.append(MoveData(piece, to))
                    continue
                if occupant != piece.color and self.capture:
                    moves.append(MoveData(piece, to, capture=to))
                break
        return moves

    def generate_attacks(self, board: "Board", piece: Piece) -> int:
        if not self.capture or not first_move_gate(board, piece, self.first_move_only):
            return 0

        attacks = 0
        for direction in by_color(self.directions, self.black_directions, piece.color):
            for to in walk(board, piece.square, direction):
                occupant = board.occupant_color(to)
                if occupant == piece.color:
                    break
                attacks |= 1 << board.square_to_index(to)
                if occupant is not None:
                    break
        return attacks
