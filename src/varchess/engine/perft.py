from __future__ import annotations

from typing import Dict, List

from .board import Board
from .move import MoveData


def pseudo_moves(board: Board) -> List[MoveData]:
    """All pseudo-moves of the side to move, piece by piece."""
    moves: List[MoveData] = []
    for piece in board.pieces_of(board.turn):
        moves.extend(piece.generate_moves(board))
    return moves


def perft(board: Board, depth: int) -> int:
    """Count leaf nodes of the pseudo-move tree rooted at ``board``.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over every pseudo-move's child perft(depth-1).

    Moves are not filtered for king safety, so counts match real chess only
    while no side can leave its king en prise.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    nodes = 0
    for m in pseudo_moves(board):
        child = board.copy()
        child.apply_move(m)
        nodes += perft(child, depth - 1)
    return nodes


def perft_divide(board: Board, depth: int) -> Dict[str, int]:
    """Per-root-move node counts at ``depth`` (keys are ``origin+destination``)."""
    if depth < 1:
        raise ValueError("depth must be >= 1")
    out: Dict[str, int] = {}
    for m in pseudo_moves(board):
        child = board.copy()
        child.apply_move(m)
        key = str(m)
        out[key] = out.get(key, 0) + perft(child, depth - 1)
    return out
