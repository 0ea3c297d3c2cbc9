from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .attributes import Castle, EnPassant, Jumping, PieceAttribute, Sliding
from .piece import Color
from .square import Offset, Square


class PieceInfo(BaseModel):
    """Definition of one piece type: presentation data plus its attributes."""

    model_config = ConfigDict(validate_assignment=True)

    id: int
    display: str
    icon: str = Field(min_length=1, max_length=1)
    value: int = 0
    attributes: List[PieceAttribute] = Field(default_factory=list)


class DefaultPiece:
    PAWN = 0
    BISHOP = 1
    KNIGHT = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    _CHARS = {"p": PAWN, "b": BISHOP, "n": KNIGHT, "r": ROOK, "q": QUEEN, "k": KING}

    @classmethod
    def from_char(cls, ch: str) -> Optional[int]:
        """Piece type for an icon letter (either case), or None."""
        return cls._CHARS.get(ch.lower())


_ORTHOGONAL = [Offset(1, 0), Offset(-1, 0), Offset(0, 1), Offset(0, -1)]
_DIAGONAL = [Offset(1, 1), Offset(-1, 1), Offset(1, -1), Offset(-1, -1)]
_KNIGHT = [
    Offset(1, 2),
    Offset(2, 1),
    Offset(-1, 2),
    Offset(-2, 1),
    Offset(1, -2),
    Offset(2, -1),
    Offset(-1, -2),
    Offset(-2, -1),
]


def default_pieces() -> Dict[int, PieceInfo]:
    """The standard chess piece set. White advances towards higher ranks."""
    return {
        DefaultPiece.PAWN: PieceInfo(
            id=DefaultPiece.PAWN,
            display="Pawn",
            icon="p",
            value=1,
            attributes=[
                Jumping(directions=[Offset(0, 1)], black_directions=[Offset(0, -1)]),
                Jumping(
                    directions=[Offset(0, 2)],
                    black_directions=[Offset(0, -2)],
                    first_move_only=True,
                    blockable=True,
                ),
                Jumping(
                    directions=[Offset(1, 1), Offset(-1, 1)],
                    black_directions=[Offset(1, -1), Offset(-1, -1)],
                    capture=True,
                    capture_only=True,
                ),
                EnPassant(
                    offsets=[Offset(1, 0), Offset(-1, 0)],
                    capture_offset=Offset(0, 1),
                    black_capture_offset=Offset(0, -1),
                    piece=DefaultPiece.PAWN,
                ),
            ],
        ),
        DefaultPiece.BISHOP: PieceInfo(
            id=DefaultPiece.BISHOP,
            display="Bishop",
            icon="b",
            value=3,
            attributes=[Sliding(directions=list(_DIAGONAL), capture=True)],
        ),
        DefaultPiece.KNIGHT: PieceInfo(
            id=DefaultPiece.KNIGHT,
            display="Knight",
            icon="n",
            value=3,
            attributes=[Jumping(directions=list(_KNIGHT), capture=True)],
        ),
        DefaultPiece.ROOK: PieceInfo(
            id=DefaultPiece.ROOK,
            display="Rook",
            icon="r",
            value=5,
            attributes=[Sliding(directions=list(_ORTHOGONAL), capture=True)],
        ),
        DefaultPiece.QUEEN: PieceInfo(
            id=DefaultPiece.QUEEN,
            display="Queen",
            icon="q",
            value=9,
            attributes=[Sliding(directions=_ORTHOGONAL + _DIAGONAL, capture=True)],
        ),
        DefaultPiece.KING: PieceInfo(
            id=DefaultPiece.KING,
            display="King",
            icon="k",
            value=0,
            attributes=[
                Jumping(directions=_ORTHOGONAL + _DIAGONAL, capture=True),
                Castle(
                    destinations=[Offset(2, 0), Offset(-2, 0)],
                    rook=[Offset(3, 0), Offset(-4, 0)],
                    rook_destination=[Offset(1, 0), Offset(-1, 0)],
                ),
            ],
        ),
    }


_BACK_RANK = [
    DefaultPiece.ROOK,
    DefaultPiece.KNIGHT,
    DefaultPiece.BISHOP,
    DefaultPiece.QUEEN,
    DefaultPiece.KING,
    DefaultPiece.BISHOP,
    DefaultPiece.KNIGHT,
    DefaultPiece.ROOK,
]


def standard_placements(width: int = 8, height: int = 8) -> List[Tuple[Square, Color, int]]:
    """Standard opening layout as (square, color, piece_type) placements.

    Boards wider than eight files get extra pawns only; the back rank keeps
    its eight pieces starting at file a.
    """
    if width < len(_BACK_RANK) or height < 4:
        raise ValueError(f"standard layout needs at least 8x4 squares, got {width}x{height}")
    placements: List[Tuple[Square, Color, int]] = []
    for f in range(width):
        placements.append((Square(f, 1), Color.WHITE, DefaultPiece.PAWN))
        placements.append((Square(f, height - 2), Color.BLACK, DefaultPiece.PAWN))
    for f, piece_type in enumerate(_BACK_RANK):
        placements.append((Square(f, 0), Color.WHITE, piece_type))
        placements.append((Square(f, height - 1), Color.BLACK, piece_type))
    return placements
