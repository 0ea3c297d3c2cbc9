from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .piece import Piece
from .square import Square


@dataclass(frozen=True)
class MoveData:
    """Candidate or committed move.

    Attributes:
        piece (Piece): The moving piece, located on its origin square.
        to (Square): Destination of the moving piece.
        capture (Optional[Square]): Square whose occupant is removed. Usually
            ``to``; differs for en passant style captures.
        castle (Optional[Tuple[Square, Square]]): (from, to) of a companion
            piece relocated by the same move.
    """

    piece: Piece
    to: Square
    capture: Optional[Square] = None
    castle: Optional[Tuple[Square, Square]] = None

    @property
    def origin(self) -> Square:
        return self.piece.square

    @property
    def is_capture(self) -> bool:
        return self.capture is not None

    @property
    def is_castle(self) -> bool:
        return self.castle is not None

    def to_uci(self) -> str:
        """Origin and destination in long algebraic form, e.g. ``"e2e4"``."""
        return self.origin.notation + self.to.notation

    def __str__(self) -> str:
        return f"{self.origin}{self.to}"
