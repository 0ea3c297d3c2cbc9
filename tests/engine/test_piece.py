from __future__ import annotations

import pytest

from varchess.engine.board import Board
from varchess.engine.errors import BoardStateError
from varchess.engine.move import MoveData
from varchess.engine.piece import Color, Piece
from varchess.engine.pieceset import DefaultPiece
from varchess.engine.square import sq


def test_color_opponent() -> None:
    assert Color.WHITE.opponent is Color.BLACK
    assert Color.BLACK.opponent is Color.WHITE


def test_piece_moves_concatenate_attributes_in_order() -> None:
    b = Board.new()
    pawn = Piece(Color.WHITE, DefaultPiece.PAWN, sq("e2"))
    b.insert(pawn)
    b.insert(Piece(Color.BLACK, DefaultPiece.KNIGHT, sq("f3")))
    # push, double push, then diagonal capture
    assert [m.to for m in pawn.generate_moves(b)] == [sq("e3"), sq("e4"), sq("f3")]


def test_piece_attacks_union_of_attributes() -> None:
    b = Board.new()
    king = Piece(Color.WHITE, DefaultPiece.KING, sq("a1"))
    b.insert(king)
    b.insert(Piece(Color.WHITE, DefaultPiece.ROOK, sq("h1")))
    attacked = set(b.squares(king.generate_attacks(b)))
    assert attacked == {sq("a2"), sq("b1"), sq("b2")}


def test_unknown_piece_type_info_raises() -> None:
    with pytest.raises(BoardStateError):
        Piece(Color.WHITE, 42, sq("a1")).info(Board.new())


def test_compute_attacks_at_start() -> None:
    b = Board.standard()
    white = b.compute_attacks(Color.WHITE)
    assert b.attacks[Color.WHITE] == white
    rank3 = {sq(f + "3") for f in "abcdefgh"}
    rank4 = {sq(f + "4") for f in "abcdefgh"}
    attacked = set(b.squares(white))
    assert rank3 <= attacked
    assert not rank4 & attacked
    assert b.is_attacked(sq("f6"), Color.BLACK)
    assert not b.is_attacked(sq("e4"), Color.BLACK)


def test_move_data_helpers() -> None:
    pawn = Piece(Color.WHITE, DefaultPiece.PAWN, sq("e5"))
    move = MoveData(pawn, sq("d6"), capture=sq("d5"))
    assert move.origin == sq("e5")
    assert move.is_capture and not move.is_castle
    assert move.to_uci() == "e5d6"
    assert str(move) == "e5d6"
    assert pawn.moved_to(sq("d6")) == Piece(Color.WHITE, DefaultPiece.PAWN, sq("d6"))
