"""
Unit tests for the slide simulator.
"""

from maze_pieces import PAINTED, PATH, WALL
from slide import build_slide_table, simulate_slide, slide_exits


class TestSimulateSlide:
    """Test single slides."""

    def test_slides_to_wall(self, board):
        """Test the ball stops on the last cell before a wall."""
        grid, w, h, _ = board(
            "#######",
            "#S...##",
            "#######",
        )
        res = simulate_slide(grid, w, h, 1, 1, 1, 0)
        assert (res.end_x, res.end_y) == (4, 1)
        assert res.distance == 3
        assert res.tiles == ((2, 1), (3, 1), (4, 1))
        assert res.moved

    def test_blocked_slide(self, board):
        """Test a wall right next to the ball means no movement."""
        grid, w, h, _ = board(
            "#####",
            "#S..#",
            "#####",
        )
        res = simulate_slide(grid, w, h, 1, 1, -1, 0)
        assert (res.end_x, res.end_y) == (1, 1)
        assert res.distance == 0
        assert res.tiles == ()
        assert not res.moved

    def test_board_edge_stops(self):
        """Test out-of-bounds acts as a wall."""
        grid = [PATH] * 4
        res = simulate_slide(grid, 4, 1, 0, 0, 1, 0)
        assert (res.end_x, res.end_y) == (3, 0)
        assert res.distance == 3

    def test_painted_is_passable(self):
        """Test painted tiles do not stop the ball."""
        grid = [WALL, PATH, PAINTED, PAINTED, PATH, WALL]
        res = simulate_slide(grid, 6, 1, 1, 0, 1, 0)
        assert res.end_x == 4

    def test_grid_unchanged(self, board):
        """Test sliding does not mutate the grid."""
        grid, w, h, _ = board(
            "#####",
            "#S..#",
            "#####",
        )
        before = list(grid)
        simulate_slide(grid, w, h, 1, 1, 1, 0)
        assert grid == before


class TestSlideExits:
    """Test exit counting."""

    def test_corridor_and_junction(self, board):
        """Test a plus shape: center has four exits, arms have one."""
        grid, w, h, _ = board(
            "#####",
            "##.##",
            "#...#",
            "##.##",
            "#####",
        )
        assert slide_exits(grid, w, h, 2, 2) == ["UP", "DOWN", "LEFT", "RIGHT"]
        assert slide_exits(grid, w, h, 2, 1) == ["DOWN"]


class TestSlideTable:
    """Test precomputed slide entries."""

    def test_entries(self, board):
        """Test rest index and traversed indices per direction."""
        grid, w, h, _ = board(
            "#####",
            "#S..#",
            "#####",
        )
        table = build_slide_table(grid, w, h)
        start = 1 * w + 1
        up, down, left, right = table[start]
        assert up is None and down is None and left is None
        assert right == (1 * w + 3, (1 * w + 2, 1 * w + 3))
        assert table[0] is None
