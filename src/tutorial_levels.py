#!/usr/bin/env python3
"""
TUTORIAL LEVELS
Hand-made opening boards. Solutions and move targets come from the
solver, same as generated levels.
"""
from maze_pieces import LevelData, level_color, parse_rows
from maze_solver import solve

TUTORIAL_DEPTH = 12

TUTORIALS = [
    ('First Step', [
        "#####",
        "#S..#",
        "#####",
    ]),
    ('L Turn', [
        "#####",
        "#S..#",
        "###.#",
        "###.#",
        "#####",
    ]),
    ('U Turn', [
        "#####",
        "#S..#",
        "#.#.#",
        "#...#",
        "#####",
    ]),
    ('Zigzag', [
        "######",
        "#S...#",
        "####.#",
        "#....#",
        "#.####",
        "#....#",
        "######",
    ]),
    ('Square', [
        "######",
        "#S...#",
        "#.##.#",
        "#.##.#",
        "#....#",
        "######",
    ]),
    ('Small Spiral', [
        "######",
        "#S...#",
        "#.##.#",
        "#....#",
        "######",
    ]),
    ('Double L', [
        "#######",
        "#S..###",
        "###.###",
        "###...#",
        "#####.#",
        "#######",
    ]),
]


def build_tutorial(level_id, name, rows):
    grid, w, h, start = parse_rows(rows)
    if start is None:
        raise ValueError(f"tutorial {name!r} has no start tile")
    solution = solve(grid, w, h, start[0], start[1], max_depth=TUTORIAL_DEPTH)
    if solution is None:
        raise ValueError(f"tutorial {name!r} is not solvable")
    return LevelData(
        id=level_id,
        name=name,
        width=w,
        height=h,
        grid=tuple(grid),
        start_x=start[0],
        start_y=start[1],
        target_moves=len(solution),
        color_index=level_color(level_id),
        solution=tuple(solution),
        difficulty='Tutorial',
    )


def tutorial_levels():
    return [build_tutorial(i, name, rows) for i, (name, rows) in enumerate(TUTORIALS, 1)]


def get_tutorial_level(level_id):
    if not 1 <= level_id <= len(TUTORIALS):
        return None
    name, rows = TUTORIALS[level_id - 1]
    return build_tutorial(level_id, name, rows)


if __name__ == '__main__':
    for lv in tutorial_levels():
        print(f"{lv.id}. {lv.name}: {lv.target_moves} moves -> {' '.join(lv.solution)}")
