"""Rules core: board state, piece attributes and move application.

Quick start::

    from varchess.engine import Board, sq

    board = Board.standard()
    knight = board.piece_at(sq("b1"))
    for move in board.generate_moves(knight):
        print(move)
"""

from .attributes import Castle, EnPassant, Jumping, PieceAttribute, Sliding
from .board import Board
from .errors import BoardStateError, RuleNotImplementedError, RulesError
from .move import MoveData
from .piece import Color, Piece
from .pieceset import DefaultPiece, PieceInfo, default_pieces, standard_placements
from .square import Offset, Square, sq

__all__ = [
    "Board",
    "BoardStateError",
    "Castle",
    "Color",
    "DefaultPiece",
    "EnPassant",
    "Jumping",
    "MoveData",
    "Offset",
    "Piece",
    "PieceAttribute",
    "PieceInfo",
    "RuleNotImplementedError",
    "RulesError",
    "Sliding",
    "Square",
    "default_pieces",
    "sq",
    "standard_placements",
]
