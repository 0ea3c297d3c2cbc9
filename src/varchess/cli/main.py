from __future__ import annotations

import argparse
import logging
import re
import sys
import time
from typing import List, Optional, Sequence

from ..engine.board import Board
from ..engine.errors import RulesError
from ..engine.move import MoveData
from ..engine.perft import perft, perft_divide
from ..engine.piece import Color, Piece
from ..engine.pieceset import DefaultPiece
from ..engine.square import Square


logger = logging.getLogger(__name__)

_MOVE_RE = re.compile(r"^([a-z]\d+)([a-z]\d+)$")


def parse_placement(text: str) -> Piece:
    """Parse ``Nb1`` style placements: icon letter (uppercase = white) + square."""
    if len(text) < 3:
        raise ValueError(f"invalid placement: {text!r}")
    piece_type = DefaultPiece.from_char(text[0])
    if piece_type is None:
        raise ValueError(f"unknown piece letter: {text[0]!r}")
    color = Color.WHITE if text[0].isupper() else Color.BLACK
    return Piece(color, piece_type, Square.from_notation(text[1:]))


def find_move(board: Board, text: str) -> MoveData:
    """Resolve ``e2e4`` against the pseudo-moves of the piece on the origin."""
    m = _MOVE_RE.match(text)
    if m is None:
        raise ValueError(f"invalid move: {text!r}")
    origin, to = Square.from_notation(m.group(1)), Square.from_notation(m.group(2))
    piece = board.piece_at(origin)
    if piece is None:
        raise ValueError(f"no piece on {origin}")
    for move in board.generate_moves(piece):
        if move.to == to:
            return move
    raise ValueError(f"{text} is not a pseudo-move")


def build_board(args: argparse.Namespace) -> Board:
    if args.place:
        board = Board.new(args.width, args.height)
        for text in args.place:
            board.insert(parse_placement(text))
    else:
        board = Board.standard(args.width, args.height)
    for text in args.apply or []:
        board.apply_move(find_move(board, text))
    return board


def _cmd_moves(args: argparse.Namespace) -> int:
    board = build_board(args)
    square = Square.from_notation(args.square)
    piece = board.piece_at(square)
    if piece is None:
        print(f"no piece on {square}", file=sys.stderr)
        return 1
    info = piece.info(board)
    logger.info("%s %s on %s", piece.color.name.lower(), info.display, square)
    if args.attacks:
        targets: List[str] = [str(s) for s in board.squares(board.generate_attacks(piece))]
    else:
        targets = [str(m.to) for m in board.generate_moves(piece)]
    for target in targets:
        print(target)
    return 0


def _cmd_perft(args: argparse.Namespace) -> int:
    board = build_board(args)
    start = time.perf_counter()
    if args.divide:
        counts = perft_divide(board, args.depth)
        for key in sorted(counts):
            print(f"{key}: {counts[key]}")
        nodes = sum(counts.values())
    else:
        nodes = perft(board, args.depth)
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={args.depth} time_ms={int(dt*1000)} nps={int(nodes/max(dt,1e-9))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="varchess", description="Chess-variant rules engine")
    parser.add_argument("--width", type=int, default=8, help="Board width (default: 8)")
    parser.add_argument("--height", type=int, default=8, help="Board height (default: 8)")
    parser.add_argument(
        "--place",
        action="append",
        metavar="PIECE",
        help="Start from an empty board and place e.g. Nb1 (white) or pd5 (black); repeatable",
    )
    parser.add_argument(
        "--apply", action="append", metavar="MOVE", help="Apply a move such as e2e4; repeatable"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="List pseudo-moves of the piece on a square")
    moves.add_argument("square", help="Square such as b1")
    moves.add_argument("--attacks", action="store_true", help="List attacked squares instead")
    moves.set_defaults(func=_cmd_moves)

    perft_p = sub.add_parser("perft", help="Count pseudo-move tree nodes for the side to move")
    perft_p.add_argument("--depth", type=int, default=2, help="Depth (default: 2)")
    perft_p.add_argument("--divide", action="store_true", help="Print per-move counts")
    perft_p.set_defaults(func=_cmd_perft)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    try:
        return args.func(args)
    except (RulesError, ValueError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
