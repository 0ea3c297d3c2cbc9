from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, List, Literal, Optional

from pydantic import Field

from ..move import MoveData
from ..piece import Piece
from ..square import Offset
from .base import AttributeInfo, InfoOption, OptionType, PieceAttributeBase, by_color

if TYPE_CHECKING:  # pragma: no cover
    from ..board import Board


class EnPassant(PieceAttributeBase):
    """Capture a just-moved enemy of type ``piece`` standing at an offset.

    The mover lands on the captured square shifted by ``capture_offset``, so
    the capture square and the destination differ.
    """

    kind: Literal["en_passant"] = "en_passant"
    offsets: List[Offset] = Field(default_factory=list)
    black_offsets: Optional[List[Offset]] = None
    capture_offset: Offset = Offset(0, 0)
    black_capture_offset: Optional[Offset] = None
    piece: int = 0

    INFO: ClassVar[AttributeInfo] = AttributeInfo(
        name="En passant",
        description=(
            "Allows the piece to capture a given piece that has just moved and is "
            "offset by a given amount."
        ),
        example="Pawn en passant",
        options=[
            InfoOption(
                name="offsets",
                description="The offsets to check for a piece to capture.",
                optional=False,
                option_type=OptionType.OFFSET_LIST,
                example="Pawns can only en passant other pawns that are next to them.",
            ),
            InfoOption(
                name="black_offsets",
                description=(
                    "The offsets to check for a piece to capture if the piece is black. "
                    "If not provided, the white offsets will be used."
                ),
                optional=True,
                option_type=OptionType.OFFSET_LIST,
                example="Pawns can only en passant other pawns that are next to them.",
            ),
            InfoOption(
                name="capture_offset",
                description="After the piece takes, the offset of the resulting position.",
                optional=False,
                option_type=OptionType.OFFSET,
                example="Pawns land on the square behind the captured pawn.",
            ),
            InfoOption(
                name="black_capture_offset",
                description=(
                    "After the piece takes, the offset of the resulting position if the "
                    "piece is black. If not provided, the white offset will be used."
                ),
                optional=True,
                option_type=OptionType.OFFSET,
                example="Pawns land on the square behind the captured pawn.",
            ),
            InfoOption(
                name="piece",
                description="The piece type that can be captured.",
                optional=False,
                option_type=OptionType.PIECE_TYPE,
                example="Pawns can only en passant other pawns.",
            ),
        ],
    )

    def generate_moves(self, board: "Board", piece: Piece) -> List[MoveData]:
        capture_offset = by_color(self.capture_offset, self.black_capture_offset, piece.color)
        # With history, only the piece that made the last move can be taken.
        last_to = board.move_history[-1].to if board.move_history else None

        moves: List[MoveData] = []
        for offset in by_color(self.offsets, self.black_offsets, piece.color):
            target_sq = piece.square.translate(offset)
            if target_sq is None or not board.valid_square(target_sq):
                continue
            target = board.piece_at(target_sq)
            if target is None or target.color == piece.color or target.piece_type != self.piece:
                continue
            if last_to is not None and last_to != target_sq:
                continue
            landing = target_sq.translate(capture_offset)
            if landing is None or not board.valid_square(landing):
                continue
            if board.occupant_color(landing) is not None:
                continue
            moves.append(MoveData(piece, landing, capture=target_sq))
        return moves

    def generate_attacks(self, board: "Board", piece: Piece) -> int:
        # Depends on the last move, so it is not a standing threat.
        return 0
