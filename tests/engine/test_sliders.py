from __future__ import annotations

from varchess.engine.attributes import Sliding
from varchess.engine.board import Board
from varchess.engine.piece import Color, Piece
from varchess.engine.pieceset import DefaultPiece
from varchess.engine.square import sq


def test_rook_on_empty_board_has_fourteen_moves(empty_board: Board) -> None:
    b = empty_board
    rook = Piece(Color.WHITE, DefaultPiece.ROOK, sq("d4"))
    b.insert(rook)
    moves = b.generate_moves(rook)
    assert len(moves) == 14
    assert all(m.capture is None for m in moves)


def test_slide_stops_before_friend_and_on_enemy() -> None:
    b = Board.new()
    rook = Piece(Color.WHITE, DefaultPiece.ROOK, sq("a1"))
    b.insert(rook)
    b.insert(Piece(Color.WHITE, DefaultPiece.KNIGHT, sq("d1")))
    b.insert(Piece(Color.BLACK, DefaultPiece.PAWN, sq("a4")))

    moves = {m.to: m for m in b.generate_moves(rook)}
    assert set(moves) == {sq("b1"), sq("c1"), sq("a2"), sq("a3"), sq("a4")}
    assert moves[sq("a4")].capture == sq("a4")


def test_bishop_moves_in_order_along_each_ray() -> None:
    b = Board.new()
    bishop = Piece(Color.BLACK, DefaultPiece.BISHOP, sq("c1"))
    b.insert(bishop)
    tos = [m.to for m in b.generate_moves(bishop)]
    assert tos == [sq("d2"), sq("e3"), sq("f4"), sq("g5"), sq("h6"), sq("b2"), sq("a3")]


def test_non_capturing_slider_stops_before_enemy() -> None:
    b = Board.new()
    rule = Sliding(directions=[(0, 1)])
    piece = Piece(Color.WHITE, DefaultPiece.ROOK, sq("e1"))
    b.insert(piece)
    b.insert(Piece(Color.BLACK, DefaultPiece.PAWN, sq("e4")))
    assert [m.to for m in rule.generate_moves(b, piece)] == [sq("e2"), sq("e3")]
    assert rule.generate_attacks(b, piece) == 0


def test_slider_attacks_include_enemy_blocker_only() -> None:
    b = Board.new()
    rook = Piece(Color.WHITE, DefaultPiece.ROOK, sq("a1"))
    b.insert(rook)
    b.insert(Piece(Color.WHITE, DefaultPiece.KNIGHT, sq("c1")))
    b.insert(Piece(Color.BLACK, DefaultPiece.PAWN, sq("a3")))
    attacked = set(b.squares(b.generate_attacks(rook)))
    assert attacked == {sq("b1"), sq("a2"), sq("a3")}


def test_queen_combines_both_ray_sets(empty_board: Board) -> None:
    b = empty_board
    queen = Piece(Color.WHITE, DefaultPiece.QUEEN, sq("d4"))
    b.insert(queen)
    assert len(b.generate_moves(queen)) == 27


def test_zero_direction_yields_nothing() -> None:
    b = Board.new()
    rule = Sliding(directions=[(0, 0)], capture=True)
    piece = Piece(Color.WHITE, DefaultPiece.ROOK, sq("e4"))
    b.insert(piece)
    assert rule.generate_moves(b, piece) == []
    assert rule.generate_attacks(b, piece) == 0


def test_sliding_on_rectangular_board() -> None:
    b = Board.new(3, 10)
    rook = Piece(Color.WHITE, DefaultPiece.ROOK, sq("b1"))
    b.insert(rook)
    assert len(b.generate_moves(rook)) == 2 + 9


def test_bishop_walled_in_by_friends_has_no_moves_or_attacks() -> None:
    b = Board.new()
    bishop = Piece(Color.WHITE, DefaultPiece.BISHOP, sq("d4"))
    b.insert(bishop)
    for square in ("c3", "e3", "c5", "e5"):
        b.insert(Piece(Color.WHITE, DefaultPiece.PAWN, sq(square)))
    assert b.generate_moves(bishop) == []
    assert b.generate_attacks(bishop) == 0
