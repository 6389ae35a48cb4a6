"""
Unit tests for the maze construction strategies.
"""

import pytest

from difficulty import DifficultyConfig
from maze_pieces import PATH, WALL
from maze_solver import solve
from maze_strategies import (STAIRCASE, STRATEGIES, STRATEGY_SETTINGS, RelaxingRoom,
                             carve_segment, new_grid, pick_strategy)
from maze_validator import (check_border, count_junctions, count_path, validate_connectivity,
                            validate_solution)
from seeded_random import Mulberry32
from slide import slide_exits

EASY = DifficultyConfig("Easy", 7, 4, 7)
ROOMY = DifficultyConfig("Roomy", 11, 4, 7)


def run(name, config, seeds=range(1, 21)):
    size = config.grid_size
    results = []
    for seed in seeds:
        results.append(STRATEGIES[name].attempt(Mulberry32(seed), size, size, config))
    return results


class TestCommonContract:
    """Test what every strategy promises."""

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_border_and_start(self, name):
        """Test outer ring is wall and the start is path."""
        for result in run(name, ROOMY):
            if result is None:
                continue
            assert result.strategy == name
            assert check_border(result.grid, 11, 11)
            assert result.grid[result.start_y * 11 + result.start_x] == PATH
            assert count_path(result.grid) >= STRATEGY_SETTINGS["min_path_factor"] * ROOMY.min_moves

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_some_attempts_succeed(self, name):
        """Test a handful of seeds is enough to get a grid."""
        assert any(r is not None for r in run(name, ROOMY))

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_deterministic(self, name):
        """Test the same seed builds the same grid."""
        a = STRATEGIES[name].attempt(Mulberry32(5), 11, 11, ROOMY)
        b = STRATEGIES[name].attempt(Mulberry32(5), 11, 11, ROOMY)
        assert a == b

    @pytest.mark.parametrize("name", ["room", "relaxing_room", "lattice"])
    def test_healed_grids_connected(self, name):
        """Test self-healing strategies always return connected grids."""
        for result in run(name, EASY):
            if result is None:
                continue
            assert validate_connectivity(result.grid, 7, 7, result.start_x, result.start_y)


class TestCarveSegment:
    """Test corridor carving."""

    def test_carves_within_bounds(self):
        """Test carving stops at the interior edge."""
        grid = new_grid(7, 7)
        grid[3 * 7 + 1] = PATH
        end = carve_segment(grid, 7, 7, 1, 3, 3, 2, 5, Mulberry32(1))
        assert end is not None
        ex, ey = end
        assert ey == 3 and 3 <= ex <= 5
        assert all(grid[3 * 7 + x] == PATH for x in range(1, ex + 1))
        assert grid[3 * 7 + 6] == WALL

    def test_too_short(self):
        """Test no carving when fewer than the minimum cells fit."""
        grid = new_grid(5, 5)
        grid[2 * 5 + 3] = PATH
        before = list(grid)
        assert carve_segment(grid, 5, 5, 3, 2, 3, 2, 5, Mulberry32(1)) is None
        assert grid == before

    def test_keeps_corridor_thin(self):
        """Test a new cell may not touch other path."""
        grid = new_grid(9, 9)
        for x in range(1, 6):
            grid[2 * 9 + x] = PATH
        grid[4 * 9 + 1] = PATH
        # (1, 3) would touch the corridor on row 2
        assert carve_segment(grid, 9, 9, 1, 4, 0, 2, 5, Mulberry32(3)) is None

    def test_small_grid_rejected(self):
        """Test grids below 3x3 raise."""
        with pytest.raises(ValueError):
            new_grid(2, 5)


class TestRelaxingRoom:
    """Test dead-end elimination."""

    def test_opens_dead_ends(self, board):
        """Test no dead end remains that could still be opened."""
        grid, w, h, _ = board(
            "#######",
            "#.....#",
            "#######",
            "#######",
            "#######",
        )
        opened = RelaxingRoom().open_dead_ends(grid, w, h, Mulberry32(5))
        assert opened >= 1
        for i, c in enumerate(grid):
            if c != PATH:
                continue
            x, y = i % w, i // w
            if len(slide_exits(grid, w, h, x, y)) < 2:
                neighbors = [(x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)]
                assert all(
                    not (0 < nx < w - 1 and 0 < ny < h - 1) or grid[ny * w + nx] == PATH
                    for nx, ny in neighbors
                )


class TestStaircase:
    """Test the last-resort layout."""

    @pytest.mark.parametrize("size,spurs,moves", [
        (7, 0, 4),
        (7, 2, 6),
        (9, 1, 7),
        (13, 4, 14),
        (15, 8, 20),
        (15, 10, 22),
    ])
    def test_moves_and_junctions(self, size, spurs, moves):
        """Test one move per step plus one per spur, and one junction per spur."""
        maze = STAIRCASE.build(size, size, spurs)
        assert check_border(maze.grid, size, size)
        assert validate_connectivity(maze.grid, size, size, 1, 1)
        assert count_junctions(maze.grid, size, size) == spurs
        solution = solve(maze.grid, size, size, 1, 1, max_depth=40)
        assert len(solution) == moves
        assert validate_solution(maze.grid, size, size, 1, 1, solution)

    def test_spur_taken_first(self):
        """Test the solver turns into a spur before taking the next step."""
        maze = STAIRCASE.build(7, 7, 2)
        solution = solve(maze.grid, 7, 7, 1, 1, max_depth=10)
        assert solution == ["RIGHT", "DOWN", "LEFT", "RIGHT", "UP", "DOWN"]

    def test_spur_slots(self):
        """Test spur count is capped by the available turns."""
        assert STAIRCASE.steps(15, 15) == 6
        assert len(STAIRCASE.spur_cells(15, 15)) == 10
        assert STAIRCASE.build(15, 15, 99).grid == STAIRCASE.build(15, 15, 10).grid

    def test_attempt_reaches_min_moves(self):
        """Test the plain strategy interface sizes spurs to min_moves."""
        config = DifficultyConfig("Any", 15, 20, 30)
        maze = STAIRCASE.attempt(None, 15, 15, config)
        assert maze.strategy == "staircase"
        assert len(solve(maze.grid, 15, 15, 1, 1, max_depth=36)) == 20


class TestPickStrategy:
    """Test weighted strategy selection."""

    def test_only_weighted(self):
        """Test a single non-zero weight always wins."""
        rng = Mulberry32(1)
        for _ in range(20):
            assert pick_strategy(rng, {"room": 0.0, "lattice": 1.0}).name == "lattice"
