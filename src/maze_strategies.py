#!/usr/bin/env python3
"""
MAZE STRATEGIES
Interchangeable ways to carve a wall/path grid and pick a start cell.

Every strategy has the same shape: attempt(rng, width, height, config)
returns a MazeResult, or None when this roll did not produce a usable
grid (the orchestrator just tries again). All of them keep the outer
ring as wall.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from maze_pieces import WALL, PATH, DIRS
from maze_validator import count_path, heal_unreachable
from slide import slide_exits

STRATEGY_SETTINGS = {
    'segment_len': (2, 5),       # new cells per main-corridor segment
    'branch_len': (2, 3),        # new cells per dead-end branch
    'branch_every': 4,           # one extra branch per this many segments
    'min_path_factor': 2,        # path tiles required per min_moves
    'room_density': (0.25, 0.45),
    'lattice_spacing': (2, 3),
    'lattice_removal': (0.10, 0.30),
    'dead_end_rounds': 200,
}

OBSTACLE_KINDS = ['pillar', 'line', 'l_shape', 'block']


@dataclass
class MazeResult:
    grid: List[int]
    start_x: int
    start_y: int
    strategy: str


def new_grid(w: int, h: int, fill: int = WALL) -> List[int]:
    if w < 3 or h < 3:
        raise ValueError(f"grid {w}x{h} too small, need at least 3x3")
    return [fill] * (w * h)


def create_bordered_room(w: int, h: int) -> List[int]:
    """Open interior with a one-tile wall ring"""
    grid = new_grid(w, h, WALL)
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            grid[y * w + x] = PATH
    return grid


def is_interior(x: int, y: int, w: int, h: int) -> bool:
    return 0 < x < w - 1 and 0 < y < h - 1


def path_cells(grid: List[int]) -> List[int]:
    return [i for i, c in enumerate(grid) if c == PATH]


def enough_path(grid: List[int], config) -> bool:
    return count_path(grid) >= STRATEGY_SETTINGS['min_path_factor'] * config.min_moves


def carve_segment(grid: List[int], w: int, h: int, x: int, y: int, d: int,
                  lo: int, hi: int, rng) -> Optional[Tuple[int, int]]:
    """
    Carve lo..hi new cells from (x, y) in direction d, keeping the corridor
    one tile wide: a new cell may only touch the cell it was carved from.
    Returns the end cell, or None if fewer than lo cells fit.
    """
    dx, dy = DIRS[d]
    room = 0
    cx, cy = x, y
    while room < hi:
        nx, ny = cx + dx, cy + dy
        if not is_interior(nx, ny, w, h) or grid[ny * w + nx] != WALL:
            break
        conflict = False
        for ex, ey in DIRS:
            ax, ay = nx + ex, ny + ey
            if (ax, ay) == (cx, cy):
                continue
            if grid[ay * w + ax] == PATH:
                conflict = True
                break
        if conflict:
            break
        room += 1
        cx, cy = nx, ny

    if room < lo:
        return None

    length = min(rng.randint(lo, hi), room)
    for _ in range(length):
        x, y = x + dx, y + dy
        grid[y * w + x] = PATH
    return x, y


def pick_start(grid: List[int], w: int, rng) -> Tuple[int, int]:
    i = rng.choice(path_cells(grid))
    return i % w, i // w


# === BRANCHING CORRIDOR ===

class BranchingCorridor:
    """A winding one-wide corridor with dead-end branches off its turns"""
    name = 'branching'

    def attempt(self, rng, w: int, h: int, config) -> Optional[MazeResult]:
        grid = new_grid(w, h, WALL)
        sx = rng.randint(1, w - 2)
        sy = rng.randint(1, h - 2)
        grid[sy * w + sx] = PATH

        lo, hi = STRATEGY_SETTINGS['segment_len']
        target = rng.randint(config.min_moves, config.max_moves)

        x, y = sx, sy
        prev = None
        # (point, direction the corridor leaves it in)
        turns = []
        for _ in range(target):
            order = rng.shuffled(range(4))
            if prev is not None:
                # never reverse; going straight only when no turn fits
                order = [d for d in order if d != prev and d != prev ^ 1] + [prev]
            end = None
            for d in order:
                end = carve_segment(grid, w, h, x, y, d, lo, hi, rng)
                if end:
                    turns.append(((x, y), d))
                    prev = d
                    break
            if end is None:
                break
            x, y = end

        # Branch off the far side of a turn: the ball stops there anyway,
        # and leaving the branch slides straight into the next segment, so
        # each branch adds exactly one move. Small grids run out of room for
        # min_moves turns; branches make up the difference.
        blo, bhi = STRATEGY_SETTINGS['branch_len']
        branches = max(1 + len(turns) // STRATEGY_SETTINGS['branch_every'],
                       config.min_moves - len(turns))
        carved = 0
        for (rx, ry), out_dir in rng.shuffled(turns[1:]):
            if carved >= branches:
                break
            if carve_segment(grid, w, h, rx, ry, out_dir ^ 1, blo, bhi, rng):
                carved += 1

        if len(turns) + carved < config.min_moves or not enough_path(grid, config):
            return None
        return MazeResult(grid, sx, sy, self.name)


# === ROOM WITH OBSTACLES ===

def obstacle_cells(kind: str, x: int, y: int, rng) -> List[Tuple[int, int]]:
    if kind == 'pillar':
        return [(x, y)]
    if kind == 'line':
        length = rng.randint(2, 3)
        if rng.random() < 0.5:
            return [(x + k, y) for k in range(length)]
        return [(x, y + k) for k in range(length)]
    if kind == 'l_shape':
        ax = 1 if rng.random() < 0.5 else -1
        ay = 1 if rng.random() < 0.5 else -1
        return [(x, y), (x + ax, y), (x, y + ay)]
    # 2x2 block
    return [(x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1)]


class RoomWithObstacles:
    """An open room re-filled with scattered obstacles, then healed"""
    name = 'room'

    def build(self, rng, w: int, h: int) -> Tuple[List[int], int, int]:
        grid = create_bordered_room(w, h)
        interior = (w - 2) * (h - 2)
        lo, hi = STRATEGY_SETTINGS['room_density']
        target = int(interior * rng.uniform(lo, hi))

        walls = 0
        tries = 0
        while walls < target and tries < interior * 4:
            tries += 1
            kind = rng.choice(OBSTACLE_KINDS)
            ox = rng.randint(1, w - 2)
            oy = rng.randint(1, h - 2)
            for cx, cy in obstacle_cells(kind, ox, oy, rng):
                if is_interior(cx, cy, w, h) and grid[cy * w + cx] == PATH:
                    grid[cy * w + cx] = WALL
                    walls += 1

        if not path_cells(grid):
            return grid, -1, -1
        sx, sy = pick_start(grid, w, rng)
        heal_unreachable(grid, w, h, sx, sy)
        return grid, sx, sy

    def attempt(self, rng, w: int, h: int, config) -> Optional[MazeResult]:
        grid, sx, sy = self.build(rng, w, h)
        if sx < 0 or not enough_path(grid, config):
            return None
        return MazeResult(grid, sx, sy, self.name)


class RelaxingRoom(RoomWithObstacles):
    """Obstacle room with every dead end opened up"""
    name = 'relaxing_room'

    def open_dead_ends(self, grid: List[int], w: int, h: int, rng) -> int:
        opened = 0
        for _ in range(STRATEGY_SETTINGS['dead_end_rounds']):
            candidates = []
            for i in path_cells(grid):
                x, y = i % w, i // w
                if len(slide_exits(grid, w, h, x, y)) >= 2:
                    continue
                walls = [(x + dx, y + dy) for dx, dy in DIRS
                         if is_interior(x + dx, y + dy, w, h)
                         and grid[(y + dy) * w + x + dx] == WALL]
                if walls:
                    candidates.append(walls)
            if not candidates:
                break
            ox, oy = rng.choice(rng.choice(candidates))
            grid[oy * w + ox] = PATH
            opened += 1
        return opened

    def attempt(self, rng, w: int, h: int, config) -> Optional[MazeResult]:
        grid, sx, sy = self.build(rng, w, h)
        if sx < 0:
            return None
        self.open_dead_ends(grid, w, h, rng)
        heal_unreachable(grid, w, h, sx, sy)
        if not enough_path(grid, config):
            return None
        return MazeResult(grid, sx, sy, self.name)


# === REGULAR LATTICE ===

class RegularLattice:
    """Every Nth row and column open, with random cells knocked out"""
    name = 'lattice'

    def attempt(self, rng, w: int, h: int, config) -> Optional[MazeResult]:
        grid = new_grid(w, h, WALL)
        spacing = rng.randint(*STRATEGY_SETTINGS['lattice_spacing'])
        for y in range(1, h - 1):
            for x in range(1, w - 1):
                if (y - 1) % spacing == 0 or (x - 1) % spacing == 0:
                    grid[y * w + x] = PATH

        cells = path_cells(grid)
        lo, hi = STRATEGY_SETTINGS['lattice_removal']
        remove = int(len(cells) * rng.uniform(lo, hi))
        for i in rng.shuffled(cells)[:remove]:
            grid[i] = WALL

        if not path_cells(grid):
            return None
        sx, sy = pick_start(grid, w, rng)
        heal_unreachable(grid, w, h, sx, sy)
        if not enough_path(grid, config):
            return None
        return MazeResult(grid, sx, sy, self.name)


# === STAIRCASE (last resort) ===

class Staircase:
    """
    Two-cell steps from the top-left corner down the diagonal: RIGHT, DOWN,
    RIGHT, DOWN ... One-cell spurs can hang off the turns, UP from a turn
    reached moving right and LEFT from a turn reached moving down.

    Each spur is a junction and costs one move. The solver tries the spur
    before the step it sits on, so it walks the grid without backtracking
    and the solution is always 2 * steps + spurs moves long.
    """
    name = 'staircase'

    def steps(self, w: int, h: int) -> int:
        """Right/down step pairs that fit inside the border"""
        return max(0, (min(w, h) - 3) // 2)

    def spur_cells(self, w: int, h: int) -> List[Tuple[int, int]]:
        """Spur slots in path order; the final turn gets none"""
        cells = []
        for j in range(1, self.steps(w, h)):
            cells.append((2 * j, 2 * j + 1))
            cells.append((2 * j + 3, 2 * j))
        return cells

    def build(self, w: int, h: int, spurs: int) -> MazeResult:
        grid = new_grid(w, h, WALL)
        grid[1 * w + 1] = PATH
        for j in range(1, self.steps(w, h) + 1):
            top, col = 2 * j - 1, 2 * j + 1
            grid[top * w + col - 1] = PATH
            grid[top * w + col] = PATH
            grid[(top + 1) * w + col] = PATH
            grid[(top + 2) * w + col] = PATH
        for x, y in self.spur_cells(w, h)[:max(0, spurs)]:
            grid[y * w + x] = PATH
        return MazeResult(grid, 1, 1, self.name)

    def attempt(self, rng, w: int, h: int, config) -> Optional[MazeResult]:
        return self.build(w, h, config.min_moves - 2 * self.steps(w, h))


STRATEGIES = {
    'branching': BranchingCorridor(),
    'room': RoomWithObstacles(),
    'relaxing_room': RelaxingRoom(),
    'lattice': RegularLattice(),
}
STAIRCASE = Staircase()


def pick_strategy(rng, weights):
    """One weighted roll per attempt"""
    return STRATEGIES[rng.weighted_choice(weights)]
