from __future__ import annotations

import pytest

from varchess.engine.board import Board
from varchess.engine.perft import perft, perft_divide, pseudo_moves


def test_perft_depth_zero_is_one() -> None:
    assert perft(Board.standard(), 0) == 1


@pytest.mark.parametrize("depth,expected", [(1, 20), (2, 400), (3, 8902)])
def test_perft_start_position(depth: int, expected: int) -> None:
    assert perft(Board.standard(), depth) == expected


def test_perft_does_not_mutate_root() -> None:
    b = Board.standard()
    state = b.debug_state()
    perft(b, 2)
    assert b.debug_state() == state
    assert b.move_history == []


def test_perft_divide_sums_to_perft() -> None:
    b = Board.standard()
    div = perft_divide(b, 2)
    assert len(div) == 20
    assert div["e2e4"] == 20
    assert sum(div.values()) == perft(b, 2)


def test_pseudo_moves_follow_side_to_move() -> None:
    b = Board.standard()
    assert {m.piece.color for m in pseudo_moves(b)} == {b.turn}
    b.apply_move(pseudo_moves(b)[0])
    assert {m.piece.color for m in pseudo_moves(b)} == {b.turn}


def test_perft_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        perft(Board.standard(), -1)
    with pytest.raises(ValueError):
        perft_divide(Board.standard(), 0)


def test_perft_on_wider_board() -> None:
    # Ten pawns with two pushes each, four knight jumps, and the h1 rook
    # reaching the two extra files.
    assert perft(Board.standard(10, 8), 1) == 26
