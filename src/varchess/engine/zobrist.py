from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .board import Board


MASK64 = 0xFFFFFFFFFFFFFFFF


def _splitmix64(state: int) -> int:
    # Deterministic 64-bit SplitMix64 finaliser
    z = (state + 0x9E3779B97F4A7C15) & MASK64
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & MASK64
    return (z ^ (z >> 31)) & MASK64


class Zobrist:
    """Zobrist keys for boards of any size and any number of piece types.

    Keys are derived on demand from (seed, table, color, piece type, square) so
    no table has to be sized up front. Key layout:
    - piece_square(color, piece_type, sq): one key per occupied square per map
    - general_square(color, sq): one key per square of a color's union map
    - side_to_move: toggled when black is to move
    """

    def __init__(self, seed: int = 0xC0FFEE_F00D_DEAD) -> None:
        self.seed = seed & MASK64
        self._cache: Dict[Tuple[int, int, int, int], int] = {}
        self.side_to_move = self._key(0, 0, 0, 0)

    def _key(self, table: int, color: int, piece_type: int, sq: int) -> int:
        k = (table, color, piece_type, sq)
        v = self._cache.get(k)
        if v is None:
            state = self.seed
            for part in k:
                state = _splitmix64(state ^ (part & MASK64))
            v = state
            self._cache[k] = v
        return v

    def piece_square(self, color: int, piece_type: int, sq: int) -> int:
        return self._key(1, color, piece_type, sq)

    def general_square(self, color: int, sq: int) -> int:
        return self._key(2, color, 0, sq)


# Global deterministic table
ZOBRIST = Zobrist()


def _xor_bits(h: int, bitmap: int, key) -> int:
    while bitmap:
        lsb = bitmap & -bitmap
        h ^= key(lsb.bit_length() - 1)
        bitmap ^= lsb
    return h


def compute_hash_from_scratch(board: "Board") -> int:
    """Compute the 64-bit position hash of ``board``.

    XOR is commutative, so the result does not depend on the order in which
    the piece-type maps are stored. Only the parity of the half-move count is
    folded in: two identical placements with the same side to move must collide
    for repetition counting to work.
    """
    h = 0
    for color in (0, 1):
        h = _xor_bits(h, board.general_locations[color], lambda sq: ZOBRIST.general_square(color, sq))
        for piece_type, bitmap in board.piece_locations[color].items():
            h = _xor_bits(
                h, bitmap, lambda sq: ZOBRIST.piece_square(color, piece_type, sq)
            )
    if board.half_moves % 2 == 1:
        h ^= ZOBRIST.side_to_move
    return h & MASK64
