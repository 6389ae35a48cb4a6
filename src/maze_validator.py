#!/usr/bin/env python3
"""
MAZE VALIDATOR
- Slide-granular reachability (every cell crossed by a slide counts)
- Heals grids by walling off unreachable path
- Replays solutions and checks full coverage
- Quality filters that reject solvable but trivial mazes
"""
from collections import deque

from difficulty import MODE_SETTINGS, check_mode
from maze_pieces import WALL, PATH, DIRS, direction_vector
from slide import simulate_slide, slide_exits

# Solutions may run this far past max_moves before being rejected
MOVE_SLACK = 4
# Path tiles required per solution move
PATH_RATIO = 1.5


def count_path(grid):
    return sum(1 for c in grid if c == PATH)


def reachable_cells(grid, width, height, sx, sy):
    """BFS where each step is a full slide; returns a bytearray of visited indices"""
    visited = bytearray(len(grid))
    visited[sy * width + sx] = 1
    queue = deque([(sx, sy)])

    while queue:
        x, y = queue.popleft()
        for dx, dy in DIRS:
            cx, cy = x, y
            while True:
                nx, ny = cx + dx, cy + dy
                if nx < 0 or nx >= width or ny < 0 or ny >= height:
                    break
                if grid[ny * width + nx] == WALL:
                    break
                cx, cy = nx, ny
                i = cy * width + cx
                if not visited[i]:
                    visited[i] = 1
                    queue.append((cx, cy))
    return visited


def validate_connectivity(grid, width, height, sx, sy):
    """True if every PATH tile is reachable from the start via slides"""
    if grid[sy * width + sx] != PATH:
        return False
    visited = reachable_cells(grid, width, height, sx, sy)
    return sum(visited) >= count_path(grid)


def heal_unreachable(grid, width, height, sx, sy):
    """
    Turn every PATH tile that no slide from the start can cross into WALL.
    Walling unreached tiles never changes a reachable slide, so the result
    is fully connected. Mutates grid, returns number of tiles removed.
    """
    visited = reachable_cells(grid, width, height, sx, sy)
    removed = 0
    for i, c in enumerate(grid):
        if c == PATH and not visited[i]:
            grid[i] = WALL
            removed += 1
    return removed


def replay_solution(grid, width, height, sx, sy, solution):
    """Painted index set after replaying solution, or None if a move goes nowhere"""
    painted = {sy * width + sx}
    x, y = sx, sy
    for name in solution:
        dx, dy = direction_vector(name)
        res = simulate_slide(grid, width, height, x, y, dx, dy)
        if not res.moved:
            return None
        for tx, ty in res.tiles:
            painted.add(ty * width + tx)
        x, y = res.end_x, res.end_y
    return painted


def validate_solution(grid, width, height, sx, sy, solution):
    """Replaying the solution paints exactly the set of PATH tiles"""
    painted = replay_solution(grid, width, height, sx, sy, solution)
    if painted is None:
        return False
    path = {i for i, c in enumerate(grid) if c == PATH}
    return painted == path


def count_junctions(grid, width, height):
    """PATH tiles with 3 or more slide exits"""
    junctions = 0
    for i, c in enumerate(grid):
        if c == PATH and len(slide_exits(grid, width, height, i % width, i // width)) >= 3:
            junctions += 1
    return junctions


def check_border(grid, width, height):
    """Outer ring must be all wall"""
    for x in range(width):
        if grid[x] != WALL or grid[(height - 1) * width + x] != WALL:
            return False
    for y in range(height):
        if grid[y * width] != WALL or grid[y * width + width - 1] != WALL:
            return False
    return True


def required_junctions(config, mode):
    return int(MODE_SETTINGS[check_mode(mode)]['junction_ratio'] * config.min_moves)


def check_quality(grid, width, height, solution, config, mode):
    """Return a list of issues; empty means the maze is accepted"""
    issues = []
    moves = len(solution)

    if moves < config.min_moves or moves > config.max_moves + MOVE_SLACK:
        issues.append(f"MOVES: {moves} outside [{config.min_moves}, {config.max_moves + MOVE_SLACK}]")

    needed = required_junctions(config, mode)
    junctions = count_junctions(grid, width, height)
    if junctions < needed:
        issues.append(f"JUNCTIONS: {junctions} < {needed}")

    path = count_path(grid)
    if path < PATH_RATIO * moves:
        issues.append(f"DEGENERATE: {path} path tiles for {moves} moves")

    return issues
