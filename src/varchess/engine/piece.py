from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, List

from .square import Square

if TYPE_CHECKING:  # pragma: no cover
    from .board import Board
    from .move import MoveData
    from .pieceset import PieceInfo


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


@dataclass(frozen=True)
class Piece:
    """A piece as seen on a board: color, piece-type index and square.

    Pieces are views. The board stores only bitmaps, and ``Board.piece_at``
    rebuilds a Piece by finding which bitmap holds the square.
    """

    color: Color
    piece_type: int
    square: Square

    def info(self, board: "Board") -> "PieceInfo":
        return board.piece_info(self.piece_type)

    def generate_moves(self, board: "Board") -> List["MoveData"]:
        """Pseudo-moves of this piece, attribute by attribute in declaration order."""
        moves: List["MoveData"] = []
        for attribute in self.info(board).attributes:
            moves.extend(attribute.generate_moves(board, self))
        return moves

    def generate_attacks(self, board: "Board") -> int:
        """Bitmap of squares threatened by any of this piece's attributes."""
        attacks = 0
        for attribute in self.info(board).attributes:
            attacks |= attribute.generate_attacks(board, self)
        return attacks

    def moved_to(self, square: Square) -> "Piece":
        return Piece(self.color, self.piece_type, square)

    def __str__(self) -> str:
        side = "white" if self.color is Color.WHITE else "black"
        return f"{side}:{self.piece_type}@{self.square}"
