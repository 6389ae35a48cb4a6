#!/usr/bin/env python3
"""
SLIDE SIMULATOR
The ball's only move: travel in one direction until the next cell is
a wall or off the board. Pure with respect to the grid.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from maze_pieces import WALL, PATH, DIRS, DIR_NAMES


@dataclass(frozen=True)
class SlideResult:
    end_x: int
    end_y: int
    distance: int
    tiles: Tuple[Tuple[int, int], ...]  # cells after the start, rest cell last

    @property
    def moved(self) -> bool:
        return self.distance > 0


def simulate_slide(grid: Sequence[int], width: int, height: int,
                   x: int, y: int, dx: int, dy: int) -> SlideResult:
    """Slide from (x, y) until hitting a wall or the border"""
    tiles = []
    while True:
        nx, ny = x + dx, y + dy
        if nx < 0 or nx >= width or ny < 0 or ny >= height:
            break
        if grid[ny * width + nx] == WALL:
            break
        x, y = nx, ny
        tiles.append((x, y))
    return SlideResult(x, y, len(tiles), tuple(tiles))


def slide_exits(grid, width, height, x, y):
    """Directions (names) in which a slide from (x, y) moves at least one cell"""
    exits = []
    for name, (dx, dy) in zip(DIR_NAMES, DIRS):
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height and grid[ny * width + nx] != WALL:
            exits.append(name)
    return exits


SlideEntry = Optional[Tuple[int, Tuple[int, ...]]]


def build_slide_table(grid: Sequence[int], width: int, height: int) -> List[Optional[List[SlideEntry]]]:
    """
    For each PATH index, one entry per direction (DIRS order):
    (rest_index, traversed_indices) or None when the slide does not move.
    Non-path indices map to None.
    """
    table: List[Optional[List[SlideEntry]]] = [None] * len(grid)
    for i, c in enumerate(grid):
        if c != PATH:
            continue
        x, y = i % width, i // width
        entries: List[SlideEntry] = []
        for dx, dy in DIRS:
            res = simulate_slide(grid, width, height, x, y, dx, dy)
            if not res.moved:
                entries.append(None)
                continue
            indices = tuple(ty * width + tx for tx, ty in res.tiles)
            entries.append((indices[-1], indices))
        table[i] = entries
    return table
