#!/usr/bin/env python3
"""
MAZE PIECES MANIFEST
Tiles, directions and the level record shared by the generator,
solver and validator.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

# === TILE TYPES ===
WALL = 0
PATH = 1
PAINTED = 2

TILES = {
    WALL: {
        'char': '#',
        'name': 'Wall',
        'solid': True,
        'paintable': False,
        'description': 'Solid wall, stops the ball',
    },
    PATH: {
        'char': '.',
        'name': 'Path',
        'solid': False,
        'paintable': True,
        'description': 'Unpainted path tile',
    },
    PAINTED: {
        'char': '*',
        'name': 'Painted',
        'solid': False,
        'paintable': False,
        'description': 'Path tile the ball has already crossed (play time only)',
    },
}

CHAR_TO_TILE = {t['char']: value for value, t in TILES.items()}
START_CHAR = 'S'

# === DIRECTIONS ===
# Fixed order: the solver iterates directions in exactly this order.
DIRS = [(0, -1), (0, 1), (-1, 0), (1, 0)]
DIR_NAMES = ['UP', 'DOWN', 'LEFT', 'RIGHT']
DIRECTION_VECTORS = dict(zip(DIR_NAMES, DIRS))
OPPOSITE = {'UP': 'DOWN', 'DOWN': 'UP', 'LEFT': 'RIGHT', 'RIGHT': 'LEFT'}

LEVEL_COLOR_COUNT = 10


def get_index(x: int, y: int, width: int) -> int:
    return y * width + x


def get_xy(index: int, width: int) -> Tuple[int, int]:
    return index % width, index // width


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def direction_vector(name: str) -> Tuple[int, int]:
    try:
        return DIRECTION_VECTORS[name]
    except KeyError:
        raise ValueError(f"unknown direction {name!r}") from None


def level_name(level_id: int) -> str:
    return f"Level {level_id}"


def level_color(level_id: int) -> int:
    return (level_id - 1) % LEVEL_COLOR_COUNT


def parse_rows(rows: Sequence[str]) -> Tuple[List[int], int, int, Optional[Tuple[int, int]]]:
    """Parse '#'/'.' rows into a flat grid. 'S' is a path tile marking the start."""
    if not rows:
        raise ValueError("empty grid")
    width = len(rows[0])
    grid = []
    start = None
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {y} has width {len(row)}, expected {width}")
        for x, c in enumerate(row):
            if c == START_CHAR:
                start = (x, y)
                grid.append(PATH)
            elif c in CHAR_TO_TILE:
                grid.append(CHAR_TO_TILE[c])
            else:
                raise ValueError(f"unknown tile {c!r} at ({x},{y})")
    return grid, width, len(rows), start


def format_rows(grid: Sequence[int], width: int, start: Optional[Tuple[int, int]] = None) -> List[str]:
    rows = []
    for y in range(len(grid) // width):
        row = []
        for x in range(width):
            if start == (x, y):
                row.append(START_CHAR)
            else:
                row.append(TILES[grid[y * width + x]]['char'])
        rows.append(''.join(row))
    return rows


@dataclass(frozen=True)
class LevelData:
    """A generated level. Immutable once built."""
    id: int
    name: str
    width: int
    height: int
    grid: Tuple[int, ...]
    start_x: int
    start_y: int
    target_moves: int
    color_index: int
    solution: Optional[Tuple[str, ...]] = None
    difficulty: Optional[str] = None
    strategy: Optional[str] = field(default=None, compare=False)

    def path_count(self) -> int:
        return sum(1 for c in self.grid if c == PATH)

    def rows(self) -> List[str]:
        return format_rows(self.grid, self.width, (self.start_x, self.start_y))

    def relabel(self, level_id: int) -> 'LevelData':
        """Same maze under another level's id, name and color."""
        return replace(self, id=level_id, name=level_name(level_id),
                       color_index=level_color(level_id))

    def to_dict(self) -> Dict:
        data = {
            'id': self.id,
            'name': self.name,
            'width': self.width,
            'height': self.height,
            'grid': list(self.grid),
            'startX': self.start_x,
            'startY': self.start_y,
            'targetMoves': self.target_moves,
            'colorIndex': self.color_index,
        }
        if self.solution is not None:
            data['solution'] = list(self.solution)
        if self.difficulty is not None:
            data['difficulty'] = self.difficulty
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'LevelData':
        solution = data.get('solution')
        return cls(
            id=data['id'],
            name=data['name'],
            width=data['width'],
            height=data['height'],
            grid=tuple(data['grid']),
            start_x=data['startX'],
            start_y=data['startY'],
            target_moves=data['targetMoves'],
            color_index=data['colorIndex'],
            solution=tuple(solution) if solution is not None else None,
            difficulty=data.get('difficulty'),
        )


if __name__ == '__main__':
    print("=== MAZE PIECES MANIFEST ===\n")
    for value, tile in TILES.items():
        print(f"[{tile['char']}] {value} {tile['name']}: {tile['description']}")
    print(f"\nDirections: {DIRECTION_VECTORS}")
