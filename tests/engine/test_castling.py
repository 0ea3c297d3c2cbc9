from __future__ import annotations

import pytest

from varchess.engine.attributes import Castle
from varchess.engine.board import Board
from varchess.engine.errors import RuleNotImplementedError
from varchess.engine.piece import Color, Piece
from varchess.engine.pieceset import DefaultPiece
from varchess.engine.square import sq


def castles(board: Board, square: str) -> dict:
    king = board.piece_at(sq(square))
    return {m.to: m.castle for m in board.generate_moves(king) if m.castle is not None}


def corner_board(color: Color = Color.WHITE, rank: str = "1") -> Board:
    b = Board.new()
    b.insert(Piece(color, DefaultPiece.KING, sq("e" + rank)))
    b.insert(Piece(color, DefaultPiece.ROOK, sq("a" + rank)))
    b.insert(Piece(color, DefaultPiece.ROOK, sq("h" + rank)))
    return b


def test_both_sides_available_with_clear_back_rank() -> None:
    b = corner_board()
    assert castles(b, "e1") == {
        sq("g1"): (sq("h1"), sq("f1")),
        sq("c1"): (sq("a1"), sq("d1")),
    }


def test_black_uses_the_same_relative_offsets() -> None:
    b = corner_board(Color.BLACK, "8")
    assert castles(b, "e8") == {
        sq("g8"): (sq("h8"), sq("f8")),
        sq("c8"): (sq("a8"), sq("d8")),
    }


def test_blocked_path_removes_that_side() -> None:
    b = corner_board()
    b.insert(Piece(Color.WHITE, DefaultPiece.KNIGHT, sq("b1")))
    assert set(castles(b, "e1")) == {sq("g1")}
    b.insert(Piece(Color.BLACK, DefaultPiece.BISHOP, sq("f1")))
    assert castles(b, "e1") == {}


def test_moved_king_or_rook_cannot_castle() -> None:
    b = Board.new()
    b.insert(Piece(Color.WHITE, DefaultPiece.KING, sq("e1")))
    b.insert(Piece(Color.WHITE, DefaultPiece.ROOK, sq("h1")), unmoved=False)
    b.insert(Piece(Color.WHITE, DefaultPiece.ROOK, sq("a1")))
    assert set(castles(b, "e1")) == {sq("c1")}

    b = corner_board()
    rook = b.piece_at(sq("h1"))
    b.apply_move(next(m for m in b.generate_moves(rook) if m.to == sq("h2")))
    rook = b.piece_at(sq("h2"))
    b.apply_move(next(m for m in b.generate_moves(rook) if m.to == sq("h1")))
    assert set(castles(b, "e1")) == {sq("c1")}


def test_enemy_companion_does_not_castle() -> None:
    b = Board.new()
    b.insert(Piece(Color.WHITE, DefaultPiece.KING, sq("e1")))
    b.insert(Piece(Color.BLACK, DefaultPiece.ROOK, sq("h1")))
    assert castles(b, "e1") == {}


def test_applied_castle_moves_both_pieces(assert_consistent) -> None:
    b = corner_board()
    king = b.piece_at(sq("e1"))
    move = next(m for m in b.generate_moves(king) if m.to == sq("c1") and m.is_castle)
    b.apply_move(move)
    assert b.piece_at(sq("c1")).piece_type == DefaultPiece.KING
    assert b.piece_at(sq("d1")).piece_type == DefaultPiece.ROOK
    assert b.piece_at(sq("a1")) is None
    assert castles(b, "c1") == {}
    assert_consistent(b)


def test_castling_contributes_no_attacks() -> None:
    b = corner_board()
    rule = b.piece_info(DefaultPiece.KING).attributes[1]
    assert isinstance(rule, Castle)
    assert rule.generate_attacks(b, b.piece_at(sq("e1"))) == 0


def test_mismatched_offset_lists_are_rejected() -> None:
    b = corner_board()
    rule = Castle(destinations=[(2, 0)], rook=[(3, 0), (-4, 0)], rook_destination=[(1, 0)])
    with pytest.raises(RuleNotImplementedError):
        rule.generate_moves(b, b.piece_at(sq("e1")))


def test_knight_shaped_companion_path_is_not_supported() -> None:
    b = Board.new()
    b.insert(Piece(Color.WHITE, DefaultPiece.KING, sq("e1")))
    b.insert(Piece(Color.WHITE, DefaultPiece.ROOK, sq("f3")))
    rule = Castle(destinations=[(0, 1)], rook=[(1, 2)], rook_destination=[(-1, 0)])
    with pytest.raises(RuleNotImplementedError):
        rule.generate_moves(b, b.piece_at(sq("e1")))
