from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ..errors import RuleNotImplementedError
from ..piece import Color, Piece
from ..square import Square

if TYPE_CHECKING:  # pragma: no cover
    from ..board import Board
    from ..move import MoveData


T = TypeVar("T")


class OptionType(str, Enum):
    BOOL = "bool"
    OFFSET = "offset"
    OFFSET_LIST = "offset_list"
    PIECE_TYPE = "piece_type"


class InfoOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    optional: bool
    option_type: OptionType
    example: Optional[str] = None


class AttributeInfo(BaseModel):
    """Static self-description consumed by piece-editing tools."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    example: Optional[str] = None
    options: List[InfoOption]

    def option_names(self) -> List[str]:
        return [o.name for o in self.options]


FIRST_MOVE_OPTION = InfoOption(
    name="first_move_only",
    description="Can only move on the first move of the piece.",
    optional=False,
    option_type=OptionType.BOOL,
    example="Pawn (double move)",
)


class PieceAttributeBase(BaseModel):
    """Shared behaviour of the movement attributes.

    Subclasses are pure configuration plus two read-only board traversals:
    ``generate_moves`` and ``generate_attacks``. Configuration changes go through
    ``set_option``, which validates the new value against the field type.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    INFO: ClassVar[AttributeInfo]

    def generate_moves(self, board: "Board", piece: Piece) -> List["MoveData"]:
        raise NotImplementedError

    def generate_attacks(self, board: "Board", piece: Piece) -> int:
        raise NotImplementedError

    def describe(self) -> AttributeInfo:
        return self.INFO

    def set_option(self, name: str, value: Any) -> None:
        """Assign one declared option.

        Unknown option names and ``None`` values are ignored. A value of the
        wrong shape raises ``pydantic.ValidationError`` and leaves the
        attribute unchanged.
        """
        if value is None or name not in self.INFO.option_names():
            return
        setattr(self, name, value)


def by_color(white: T, black: Optional[T], color: Color) -> T:
    """Pick the black override for black pieces when one is configured."""
    if black is not None and color is Color.BLACK:
        return black
    return white


def first_move_gate(board: "Board", piece: Piece, first_move_only: bool) -> bool:
    """True when a first-move-only rule may still fire for ``piece``."""
    return not first_move_only or board.is_unmoved(piece.color, piece.square)


def walk(board: "Board", origin: Square, direction: tuple[int, int]) -> Iterator[Square]:
    """Yield squares from one step past ``origin`` along ``direction`` until off-board."""
    if direction[0] == 0 and direction[1] == 0:
        return
    current = origin.translate(direction)
    while current is not None and board.valid_square(current):
        yield current
        current = current.translate(direction)


def squares_between(a: Square, b: Square) -> List[Square]:
    """Squares strictly between ``a`` and ``b`` on a rank, file or diagonal.

    Raises:
        RuleNotImplementedError: If ``a`` and ``b`` are not on a shared line.
    """
    df = b.file - a.file
    dr = b.rank - a.rank
    if df == 0 and dr == 0:
        return []
    if df != 0 and dr != 0 and abs(df) != abs(dr):
        raise RuleNotImplementedError(f"no straight path between {a} and {b}")
    step = ((df > 0) - (df < 0), (dr > 0) - (dr < 0))
    out: List[Square] = []
    current = Square(a.file + step[0], a.rank + step[1])
    while current != b:
        out.append(current)
        current = Square(current.file + step[0], current.rank + step[1])
    return out
