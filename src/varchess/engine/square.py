from __future__ import annotations

from typing import NamedTuple, Optional


FILES = "abcdefghijklmnopqrstuvwxyz"


class Offset(NamedTuple):
    """Signed (file, rank) delta used by movement rules."""

    file: int
    rank: int

    def to_square(self) -> Optional["Square"]:
        """Return the equivalent Square, or None if either component is negative."""
        if self.file < 0 or self.rank < 0:
            return None
        return Square(self.file, self.rank)

    def __neg__(self) -> "Offset":
        return Offset(-self.file, -self.rank)


class Square(NamedTuple):
    """Unsigned board coordinate; a1 is ``Square(0, 0)``.

    A Square only knows it is non-negative. Whether it lies on a given board
    is decided by ``Board.valid_square``.
    """

    file: int
    rank: int

    @classmethod
    def from_notation(cls, s: str) -> "Square":
        """Parse algebraic notation such as ``"e4"`` or ``"j10"``.

        Args:
            s (str): File letter followed by a 1-based rank number.

        Returns:
            Square: Parsed square.

        Raises:
            ValueError: If ``s`` is not a file letter followed by a positive rank.
        """
        if len(s) < 2 or s[0] not in FILES or not s[1:].isdigit():
            raise ValueError(f"invalid square: {s!r}")
        rank = int(s[1:])
        if rank < 1:
            raise ValueError(f"invalid square: {s!r}")
        return cls(FILES.index(s[0]), rank - 1)

    @property
    def notation(self) -> str:
        if self.file >= len(FILES):
            raise ValueError(f"file out of notation range: {self.file}")
        return FILES[self.file] + str(self.rank + 1)

    def as_offset(self) -> Offset:
        return Offset(self.file, self.rank)

    def translate(self, offset: tuple[int, int]) -> Optional["Square"]:
        """Shift by ``offset``; None when the result would be negative."""
        return Offset(self.file + offset[0], self.rank + offset[1]).to_square()

    def __str__(self) -> str:
        return self.notation if self.file < len(FILES) else f"({self.file},{self.rank})"


def sq(s: str) -> Square:
    """Shorthand for ``Square.from_notation``."""
    return Square.from_notation(s)
