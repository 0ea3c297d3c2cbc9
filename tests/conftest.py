import os
import sys

import pytest


# Ensure the repository's src/ is on sys.path for `from varchess...` imports
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_PATH = os.path.join(REPO_ROOT, "src")
SRC_PATH = os.path.abspath(SRC_PATH)
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)


@pytest.fixture
def empty_board():
    from varchess.engine.board import Board

    return Board.new(8, 8)


def _assert_consistent(b) -> None:
    from varchess.engine.piece import Color

    for color in Color:
        union = 0
        for bitmap in b.piece_locations[color].values():
            assert union & bitmap == 0, "per-type maps overlap"
            union |= bitmap
        assert b.general_locations[color] == union
        assert b.first_moves[color] & ~b.general_locations[color] == 0
    assert b.general_locations[Color.WHITE] & b.general_locations[Color.BLACK] == 0


@pytest.fixture
def assert_consistent():
    """Check the occupancy invariants: union maps, no overlap, first-move subset."""
    return _assert_consistent
