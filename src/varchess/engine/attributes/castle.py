from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, List, Literal, Optional

from pydantic import Field

from ..errors import RuleNotImplementedError
from ..move import MoveData
from ..piece import Piece
from ..square import Offset, Square
from .base import (
    AttributeInfo,
    InfoOption,
    OptionType,
    PieceAttributeBase,
    by_color,
    squares_between,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..board import Board


class Castle(PieceAttributeBase):
    """Move the piece together with a companion ("rook") when the way is clear.

    ``destinations``, ``rook`` and ``rook_destination`` are parallel lists of
    offsets relative to the castling piece's square. Entry ``i`` moves the
    piece by ``destinations[i]`` and the companion standing at ``rook[i]`` to
    ``rook_destination[i]``. Both pieces must be unmoved, everything between
    them must be empty, and both travel paths must be free of other pieces.
    """

    kind: Literal["castle"] = "castle"
    destinations: List[Offset] = Field(default_factory=list)
    black_destinations: Optional[List[Offset]] = None
    rook: List[Offset] = Field(default_factory=list)
    black_rook: Optional[List[Offset]] = None
    rook_destination: List[Offset] = Field(default_factory=list)
    black_rook_destination: Optional[List[Offset]] = None

    INFO: ClassVar[AttributeInfo] = AttributeInfo(
        name="Castling",
        description=(
            "Castling moves the piece to a given destination and moves the given rook "
            "to its destination, only if the way is clear."
        ),
        example="King castling",
        options=[
            InfoOption(
                name="destinations",
                description="Offsets of the castling piece's landing squares.",
                optional=False,
                option_type=OptionType.OFFSET_LIST,
                example="The king lands two squares towards the rook.",
            ),
            InfoOption(
                name="black_destinations",
                description="Landing offsets when the piece is black.",
                optional=True,
                option_type=OptionType.OFFSET_LIST,
                example="The king lands two squares towards the rook.",
            ),
            InfoOption(
                name="rook",
                description="Offsets of the companion piece, one per destination.",
                optional=False,
                option_type=OptionType.OFFSET_LIST,
                example="Rooks stand in the corners.",
            ),
            InfoOption(
                name="black_rook",
                description="Offsets of the companion piece when the piece is black.",
                optional=True,
                option_type=OptionType.OFFSET_LIST,
                example="Rooks stand in the corners.",
            ),
            InfoOption(
                name="rook_destination",
                description="Offsets where the companion lands, one per destination.",
                optional=False,
                option_type=OptionType.OFFSET_LIST,
                example="The rook jumps over the king to the adjacent square.",
            ),
            InfoOption(
                name="black_rook_destination",
                description="Companion landing offsets when the piece is black.",
                optional=True,
                option_type=OptionType.OFFSET_LIST,
                example="The rook jumps over the king to the adjacent square.",
            ),
        ],
    )

    def generate_moves(self, board: "Board", piece: Piece) -> List[MoveData]:
        destinations = by_color(self.destinations, self.black_destinations, piece.color)
        rooks = by_color(self.rook, self.black_rook, piece.color)
        rook_destinations = by_color(
            self.rook_destination, self.black_rook_destination, piece.color
        )
        if not len(destinations) == len(rooks) == len(rook_destinations):
            raise RuleNotImplementedError(
                "castling needs one rook square and one rook destination per destination"
            )
        if not board.is_unmoved(piece.color, piece.square):
            return []

        moves: List[MoveData] = []
        for dest_offset, rook_offset, rook_dest_offset in zip(
            destinations, rooks, rook_destinations
        ):
            to = piece.square.translate(dest_offset)
            rook_from = piece.square.translate(rook_offset)
            rook_to = piece.square.translate(rook_dest_offset)
            if to is None or rook_from is None or rook_to is None:
                continue
            if not all(board.valid_square(s) for s in (to, rook_from, rook_to)):
                continue
            if to == piece.square or rook_from == piece.square:
                continue

            companion = board.piece_at(rook_from)
            if companion is None or companion.color != piece.color:
                continue
            if not board.is_unmoved(piece.color, rook_from):
                continue

            if self._path_clear(board, piece.square, to, rook_from, rook_to):
                moves.append(MoveData(piece, to, castle=(rook_from, rook_to)))
        return moves

    def generate_attacks(self, board: "Board", piece: Piece) -> int:
        # Castling never captures.
        return 0

    @staticmethod
    def _path_clear(
        board: "Board", origin: Square, to: Square, rook_from: Square, rook_to: Square
    ) -> bool:
        participants = {origin, rook_from}
        path = set(squares_between(origin, rook_from))
        path.update(squares_between(origin, to))
        path.update(squares_between(rook_from, rook_to))
        path.add(to)
        path.add(rook_to)
        return all(s in participants or board.occupant_color(s) is None for s in path)
