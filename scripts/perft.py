#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import os
import sys
import time

# Allow running this script directly via `python scripts/perft.py`
# by adding the repo's src/ directory to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from varchess.engine.board import Board
from varchess.engine.perft import perft


def main() -> None:
    parser = argparse.ArgumentParser(description="Run pseudo-move perft on the standard layout")
    parser.add_argument("--width", type=int, default=8, help="Board width (default: 8)")
    parser.add_argument("--height", type=int, default=8, help="Board height (default: 8)")
    parser.add_argument("--depth", type=int, default=3, help="Perft depth (default: 3)")
    args = parser.parse_args()

    board = Board.standard(args.width, args.height)
    start = time.perf_counter()
    nodes = perft(board, args.depth)
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={args.depth} time_ms={int(dt*1000)} nps={int(nodes/max(dt,1e-9))}")


if __name__ == "__main__":
    main()
