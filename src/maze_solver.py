#!/usr/bin/env python3
"""
MAZE SOLVER
Depth-bounded DFS for a slide sequence that paints every path tile.

Each node tries UP, DOWN, LEFT, RIGHT in that order. A slide that does not
move, or that paints nothing new, is skipped; without that pruning the
search would bounce back and forth forever. The first sequence that covers
the board is returned, which is not necessarily the shortest one.

The search uses an explicit stack of [position, next_direction, painted_by_move]
frames instead of recursion, so deep tiers cannot hit the recursion limit.
"""
import logging
from typing import List, Optional, Sequence

from maze_pieces import PATH, DIR_NAMES, parse_rows
from slide import build_slide_table

logger = logging.getLogger(__name__)

# Extra depth allowed past a tier's max_moves
DEPTH_SLACK = 6
# Moves expanded before the search gives up on a grid
MAX_NODES = 20000


def solver_depth(config) -> int:
    return config.max_moves + DEPTH_SLACK


def solve(grid: Sequence[int], width: int, height: int, sx: int, sy: int,
          max_depth: int, max_nodes: int = MAX_NODES) -> Optional[List[str]]:
    """Return a list of direction names covering every PATH tile, or None"""
    # max_nodes is a second cap on top of max_depth: past it the grid is
    # reported unsolved, same as running out of depth.
    start = sy * width + sx
    if grid[start] != PATH:
        return None

    total = sum(1 for c in grid if c == PATH)
    painted = bytearray(len(grid))
    painted[start] = 1
    count = 1
    if count >= total:
        return []

    table = build_slide_table(grid, width, height)
    moves: List[str] = []
    stack = [[start, 0, None]]
    nodes = 0

    while stack:
        frame = stack[-1]
        pos, di, _ = frame

        if di >= 4 or len(moves) >= max_depth:
            # Backtrack: unpaint what the move into this node painted
            stack.pop()
            changed = frame[2]
            if changed is not None:
                for i in changed:
                    painted[i] = 0
                count -= len(changed)
                moves.pop()
            continue

        frame[1] = di + 1
        entry = table[pos][di]
        if entry is None:
            continue
        rest, tiles = entry
        fresh = [i for i in tiles if not painted[i]]
        if not fresh:
            continue

        nodes += 1
        if nodes > max_nodes:
            logger.debug("solver gave up after %d nodes", max_nodes)
            return None

        for i in fresh:
            painted[i] = 1
        count += len(fresh)
        moves.append(DIR_NAMES[di])
        if count >= total:
            return moves
        stack.append([rest, 0, fresh])

    return None


if __name__ == '__main__':
    test_grid = [
        "#######",
        "#S...##",
        "####.##",
        "#....##",
        "#.#####",
        "#.....#",
        "#######",
    ]
    grid, w, h, start = parse_rows(test_grid)
    print(solve(grid, w, h, start[0], start[1], max_depth=10))
