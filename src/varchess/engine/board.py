from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import BoardStateError
from .move import MoveData
from .piece import Color, Piece
from .pieceset import PieceInfo, default_pieces, standard_placements
from .square import Square
from .zobrist import compute_hash_from_scratch


logger = logging.getLogger(__name__)

Placement = Tuple[Square, Color, int]


def _set_bit(bb: int, idx: int) -> int:
    return bb | (1 << idx)


def _clear_bit(bb: int, idx: int) -> int:
    return bb & ~(1 << idx)


def _get_bit(bb: int, idx: int) -> bool:
    return (bb >> idx) & 1 == 1


@dataclass
class Board:
    """Board state as bitmaps over ``width * height`` squares.

    Notes:
    - Bit ``rank * width + file`` represents a square; a1 is bit 0.
    - ``piece_locations[color][piece_type]`` are the per-type maps and
      ``general_locations[color]`` is always their union. Mutate only through
      ``insert``, ``remove`` and ``apply_move`` so the two stay consistent.
    - ``first_moves[color]`` marks squares whose occupant has not moved yet.
    - ``attacks[color]`` is a cache filled by ``compute_attacks``.
    - ``turn`` is advisory; the board never refuses a move for being out of turn.
    """

    width: int
    height: int
    pieces: Dict[int, PieceInfo]
    piece_locations: List[Dict[int, int]] = field(default_factory=lambda: [{}, {}])
    general_locations: List[int] = field(default_factory=lambda: [0, 0])
    first_moves: List[int] = field(default_factory=lambda: [0, 0])
    attacks: List[int] = field(default_factory=lambda: [0, 0])
    half_moves: int = 0
    turn: Color = Color.WHITE
    move_history: List[MoveData] = field(default_factory=list)
    # position hash -> number of times reached through apply_move
    hashes: Dict[int, int] = field(default_factory=dict)
    zobrist_hash: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board dimensions must be positive, got {self.width}x{self.height}")
        for color in Color:
            for piece_type in self.pieces:
                self.piece_locations[color].setdefault(piece_type, 0)
        self.zobrist_hash = compute_hash_from_scratch(self)

    @classmethod
    def new(
        cls, width: int = 8, height: int = 8, pieces: Optional[Dict[int, PieceInfo]] = None
    ) -> "Board":
        """Create an empty board with all bitmaps clear.

        Args:
            width (int): Number of files.
            height (int): Number of ranks.
            pieces (Optional[Dict[int, PieceInfo]]): Piece-type registry. Defaults
                to the standard chess set. The board keeps its own copy of the
                mapping, so later registrations do not leak between boards.

        Returns:
            Board: Empty board.
        """
        registry = default_pieces() if pieces is None else dict(pieces)
        return cls(width=width, height=height, pieces=registry)

    @classmethod
    def from_placements(
        cls,
        placements: Iterable[Placement],
        width: int = 8,
        height: int = 8,
        pieces: Optional[Dict[int, PieceInfo]] = None,
    ) -> "Board":
        """Create a board and ``insert`` each (square, color, piece_type) placement."""
        board = cls.new(width, height, pieces)
        for square, color, piece_type in placements:
            board.insert(Piece(Color(color), piece_type, square))
        return board

    @classmethod
    def standard(cls, width: int = 8, height: int = 8) -> "Board":
        """Standard chess opening layout with the default piece set."""
        return cls.from_placements(standard_placements(width, height), width, height)

    # --- Geometry ---
    @property
    def bitlength(self) -> int:
        return self.width * self.height

    @property
    def full_moves(self) -> int:
        return self.half_moves // 2

    def square_to_index(self, square: Square) -> int:
        return square.rank * self.width + square.file

    def index_to_square(self, index: int) -> Square:
        return Square(index % self.width, index // self.width)

    def valid_square(self, square: Square) -> bool:
        return 0 <= square.file < self.width and 0 <= square.rank < self.height

    def squares(self, bitmap: int) -> List[Square]:
        """Squares set in ``bitmap``, lowest index first."""
        out: List[Square] = []
        while bitmap:
            lsb = bitmap & -bitmap
            out.append(self.index_to_square(lsb.bit_length() - 1))
            bitmap ^= lsb
        return out

    # --- Queries ---
    def occupant_color(self, square: Square) -> Optional[Color]:
        """Color of the piece on ``square``; None if empty or off-board."""
        if not self.valid_square(square):
            return None
        idx = self.square_to_index(square)
        for color in Color:
            if _get_bit(self.general_locations[color], idx):
                return color
        return None

    def piece_at(self, square: Square) -> Optional[Piece]:
        color = self.occupant_color(square)
        if color is None:
            return None
        idx = self.square_to_index(square)
        for piece_type, bitmap in self.piece_locations[color].items():
            if _get_bit(bitmap, idx):
                return Piece(color, piece_type, square)
        return None

    def is_unmoved(self, color: Color, square: Square) -> bool:
        if not self.valid_square(square):
            return False
        return _get_bit(self.first_moves[color], self.square_to_index(square))

    def piece_info(self, piece_type: int) -> PieceInfo:
        try:
            return self.pieces[piece_type]
        except KeyError:
            raise BoardStateError(f"unknown piece type: {piece_type}") from None

    def pieces_of(self, color: Color) -> Iterator[Piece]:
        """Every piece of ``color``, grouped by piece type in registry order."""
        for piece_type, bitmap in self.piece_locations[color].items():
            for square in self.squares(bitmap):
                yield Piece(color, piece_type, square)

    # --- Registry ---
    def register_piece(self, piece_type: int, info: PieceInfo) -> None:
        """Add a new piece type with empty occupancy for both colors."""
        if piece_type in self.pieces:
            raise BoardStateError(f"piece type {piece_type} already registered")
        self.pieces[piece_type] = info
        for color in Color:
            self.piece_locations[color][piece_type] = 0
        logger.debug("registered piece type %d (%s)", piece_type, info.display)

    # --- Raw placement primitives ---
    def insert(self, piece: Piece, *, unmoved: bool = True) -> None:
        """Place ``piece`` on an empty square.

        Args:
            piece (Piece): Piece to place; its square must be on-board and empty.
            unmoved (bool): Mark the square in ``first_moves`` so first-move-only
                rules apply to the piece.

        Raises:
            BoardStateError: If the square is off-board or occupied, or the
                piece type is not registered.
        """
        if not self.valid_square(piece.square):
            raise BoardStateError(f"square {piece.square} is off the board")
        if self.occupant_color(piece.square) is not None:
            raise BoardStateError(f"square {piece.square} is already occupied")
        self.piece_info(piece.piece_type)
        if piece.piece_type not in self.piece_locations[piece.color]:
            raise BoardStateError(f"piece type {piece.piece_type} has no occupancy map")
        idx = self.square_to_index(piece.square)
        self._occupy(piece.color, piece.piece_type, idx)
        if unmoved:
            self.first_moves[piece.color] = _set_bit(self.first_moves[piece.color], idx)
        self.zobrist_hash = compute_hash_from_scratch(self)

    def remove(self, piece: Piece) -> None:
        """Take ``piece`` off the board; it must be exactly where it claims to be."""
        if self.piece_at(piece.square) != piece:
            raise BoardStateError(f"{piece} is not on the board")
        self._vacate(piece.color, piece.piece_type, self.square_to_index(piece.square))
        self.zobrist_hash = compute_hash_from_scratch(self)

    def _occupy(self, color: Color, piece_type: int, idx: int) -> None:
        self.general_locations[color] = _set_bit(self.general_locations[color], idx)
        self.piece_locations[color][piece_type] = _set_bit(
            self.piece_locations[color][piece_type], idx
        )

    def _vacate(self, color: Color, piece_type: int, idx: int) -> None:
        self.general_locations[color] = _clear_bit(self.general_locations[color], idx)
        self.piece_locations[color][piece_type] = _clear_bit(
            self.piece_locations[color][piece_type], idx
        )
        self.first_moves[color] = _clear_bit(self.first_moves[color], idx)

    # --- Move generation ---
    def generate_moves(self, piece: Piece) -> List[MoveData]:
        return piece.generate_moves(self)

    def generate_attacks(self, piece: Piece) -> int:
        return piece.generate_attacks(self)

    def compute_attacks(self, color: Color) -> int:
        """Recompute and store the union of every ``color`` piece's attacks."""
        attacks = 0
        for piece in self.pieces_of(color):
            attacks |= piece.generate_attacks(self)
        self.attacks[color] = attacks
        return attacks

    def is_attacked(self, square: Square, by: Color) -> bool:
        if not self.valid_square(square):
            return False
        return _get_bit(self.compute_attacks(by), self.square_to_index(square))

    # --- Move application ---
    def apply_move(self, move: MoveData) -> None:
        """Apply ``move`` in place. Movement legality is not checked.

        Order of effects: remove the captured piece (found via ``piece_at``, so
        the capture square may differ from the destination), relocate the
        castling companion and the mover, append to history, then count the new
        position hash.

        Raises:
            BoardStateError: If the move contradicts the occupancy (mover not on
                its origin, empty or friendly capture square, occupied landing
                square). The board is left untouched in that case.
        """
        mover = move.piece
        if self.piece_at(mover.square) != mover:
            raise BoardStateError(f"no {mover} to move")
        if not self.valid_square(move.to):
            raise BoardStateError(f"destination {move.to} is off the board")

        captured: Optional[Piece] = None
        if move.capture is not None:
            captured = self.piece_at(move.capture)
            if captured is None:
                raise BoardStateError(f"nothing to capture on {move.capture}")
            if captured.color == mover.color:
                raise BoardStateError(f"cannot capture own piece on {move.capture}")

        companion: Optional[Piece] = None
        if move.castle is not None:
            rook_from, rook_to = move.castle
            companion = self.piece_at(rook_from)
            if companion is None:
                raise BoardStateError(f"no castling companion on {rook_from}")
            if companion.color != mover.color:
                raise BoardStateError(f"castling companion on {rook_from} is not friendly")
            if not self.valid_square(rook_to):
                raise BoardStateError(f"companion destination {rook_to} is off the board")

        # Squares that will be empty once captured and moving pieces are lifted.
        lifted = {mover.square}
        if captured is not None:
            lifted.add(captured.square)
        if companion is not None:
            lifted.add(companion.square)
        landings = [move.to] + ([move.castle[1]] if move.castle is not None else [])
        if len(set(landings)) != len(landings):
            raise BoardStateError("mover and companion land on the same square")
        for landing in landings:
            if landing not in lifted and self.occupant_color(landing) is not None:
                raise BoardStateError(f"landing square {landing} is occupied")

        if captured is not None:
            self._vacate(captured.color, captured.piece_type, self.square_to_index(captured.square))
        self._vacate(mover.color, mover.piece_type, self.square_to_index(mover.square))
        if companion is not None and move.castle is not None:
            self._vacate(
                companion.color, companion.piece_type, self.square_to_index(companion.square)
            )
            self._occupy(
                companion.color, companion.piece_type, self.square_to_index(move.castle[1])
            )
        self._occupy(mover.color, mover.piece_type, self.square_to_index(move.to))

        self.move_history.append(move)
        self.half_moves += 1
        self.turn = self.turn.opponent

        self.zobrist_hash = compute_hash_from_scratch(self)
        self.hashes[self.zobrist_hash] = self.hashes.get(self.zobrist_hash, 0) + 1
        logger.debug(
            "applied %s (capture=%s castle=%s) half_moves=%d",
            move,
            move.capture,
            move.castle,
            self.half_moves,
        )

    def position_hash(self) -> int:
        return compute_hash_from_scratch(self)

    def repetition_count(self) -> int:
        """How many times the current position was reached by ``apply_move``."""
        return self.hashes.get(self.zobrist_hash, 0)

    # --- Copying / debugging ---
    def copy(self) -> "Board":
        """Independent copy; the registry dict is copied, its PieceInfo entries are shared."""
        return Board(
            width=self.width,
            height=self.height,
            pieces=dict(self.pieces),
            piece_locations=[dict(m) for m in self.piece_locations],
            general_locations=list(self.general_locations),
            first_moves=list(self.first_moves),
            attacks=list(self.attacks),
            half_moves=self.half_moves,
            turn=self.turn,
            move_history=list(self.move_history),
            hashes=dict(self.hashes),
        )

    def debug_state(self) -> tuple:
        """Hashable snapshot of occupancy, first moves and move counters.

        Debugging aid: two equal snapshots mean no bitmap or counter changed.
        """
        return (
            tuple(tuple(sorted(m.items())) for m in self.piece_locations),
            tuple(self.general_locations),
            tuple(self.first_moves),
            self.half_moves,
            self.turn,
        )
