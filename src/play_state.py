#!/usr/bin/env python3
"""
PLAY STATE
Headless board for replaying moves on a generated level: paints tiles,
counts moves, undoes. Uses the same slide rule as generation, so a
renderer built on it agrees with target_moves.
"""
from difficulty import calculate_stars
from maze_pieces import PATH, PAINTED, direction_vector
from slide import simulate_slide


class Board:
    def __init__(self, level):
        self.level = level
        self.w = level.width
        self.h = level.height
        self.total = sum(1 for c in level.grid if c == PATH)
        self.reset()

    def reset(self):
        """Back to the level's starting state, in place"""
        self.grid = list(self.level.grid)
        self.painted = 0
        self.x, self.y = self.level.start_x, self.level.start_y
        self.moves = 0
        self.history = []  # (from_pos, newly_painted) per move
        self.paint(self.x, self.y)

    def paint(self, x, y):
        i = y * self.w + x
        if self.grid[i] == PATH:
            self.grid[i] = PAINTED
            self.painted += 1
            return True
        return False

    def unpaint(self, x, y):
        i = y * self.w + x
        if self.grid[i] == PAINTED:
            self.grid[i] = PATH
            self.painted -= 1
            return True
        return False

    def move(self, direction):
        """Slide the ball; a move that goes nowhere is not counted"""
        dx, dy = direction_vector(direction)
        res = simulate_slide(self.grid, self.w, self.h, self.x, self.y, dx, dy)
        if not res.moved:
            return res
        fresh = [(tx, ty) for tx, ty in res.tiles if self.paint(tx, ty)]
        self.history.append(((self.x, self.y), fresh))
        self.x, self.y = res.end_x, res.end_y
        self.moves += 1
        return res

    def undo(self):
        if not self.history:
            return False
        (self.x, self.y), fresh = self.history.pop()
        for tx, ty in fresh:
            self.unpaint(tx, ty)
        self.moves -= 1
        return True

    def is_complete(self):
        return self.painted >= self.total

    def progress(self):
        return self.painted / self.total if self.total else 0.0

    def stars(self):
        return calculate_stars(self.moves, self.level.target_moves)
