#!/usr/bin/env python3
"""
Chroma Slide level generator
Level id + mode -> seeded attempts over the construction strategies,
each checked for connectivity, solved, and quality filtered.
"""
import logging
from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, List, Optional, Tuple

from difficulty import MODE_SETTINGS, check_mode, get_difficulty_for_level
from maze_pieces import LevelData, level_name, level_color
from maze_solver import solve, solver_depth
from maze_strategies import MazeResult, STAIRCASE, pick_strategy
from maze_validator import (check_border, check_quality, required_junctions,
                            validate_connectivity, validate_solution)
from seeded_random import Mulberry32, level_seed

logger = logging.getLogger(__name__)

GENERATION = {
    'max_attempts': 150,
    'fallback_offsets': 50,    # seed shifts tried before the last resort
    'fallback_stride': 1000,   # level ids between fallback seeds
}


def attempt_level(rng: Mulberry32, config, mode: str) -> Optional[Tuple[MazeResult, List[str]]]:
    """One attempt: construct, verify, solve, filter"""
    size = config.grid_size
    strategy = pick_strategy(rng, MODE_SETTINGS[mode]['strategy_weights'])
    maze = strategy.attempt(rng, size, size, config)
    if maze is None:
        logger.debug("%s: construction failed", strategy.name)
        return None
    return verify_maze(maze, size, size, config, mode)


def verify_maze(maze: MazeResult, w: int, h: int, config,
                mode: str) -> Optional[Tuple[MazeResult, List[str]]]:
    grid, sx, sy = maze.grid, maze.start_x, maze.start_y
    if not check_border(grid, w, h):
        logger.debug("%s: path on border", maze.strategy)
        return None
    if not validate_connectivity(grid, w, h, sx, sy):
        logger.debug("%s: not connected", maze.strategy)
        return None

    solution = solve(grid, w, h, sx, sy, max_depth=solver_depth(config))
    if solution is None:
        logger.debug("%s: no solution within %d moves", maze.strategy, solver_depth(config))
        return None
    if not validate_solution(grid, w, h, sx, sy, solution):
        logger.debug("%s: solution replay mismatch", maze.strategy)
        return None

    issues = check_quality(grid, w, h, solution, config, mode)
    if issues:
        logger.debug("%s: rejected: %s", maze.strategy, '; '.join(issues))
        return None
    return maze, solution


def build_level_data(level_id: int, maze: MazeResult, solution: List[str], config) -> LevelData:
    size = config.grid_size
    return LevelData(
        id=level_id,
        name=level_name(level_id),
        width=size,
        height=size,
        grid=tuple(maze.grid),
        start_x=maze.start_x,
        start_y=maze.start_y,
        target_moves=len(solution),
        color_index=level_color(level_id),
        solution=tuple(solution),
        difficulty=config.name,
        strategy=maze.strategy,
    )


def generate_maze(level_id: int, config, mode: str = 'thinking',
                  max_attempts: Optional[int] = None) -> Optional[LevelData]:
    """Seeded attempts from one stream; None if none is accepted"""
    check_mode(mode)
    if max_attempts is None:
        max_attempts = GENERATION['max_attempts']
    rng = Mulberry32(level_seed(level_id, mode))

    for attempt in range(max_attempts):
        result = attempt_level(rng, config, mode)
        if result is None:
            continue
        maze, solution = result
        logger.debug("level %d (%s): accepted %s on attempt %d, %d moves",
                     level_id, mode, maze.strategy, attempt + 1, len(solution))
        return build_level_data(level_id, maze, solution, config)

    return None


def last_resort(level_id: int, config, mode: str) -> LevelData:
    """Staircase level with enough spurs for the tier's move and junction minimums"""
    size = config.grid_size
    spurs = max(required_junctions(config, mode),
                config.min_moves - 2 * STAIRCASE.steps(size, size))
    maze = STAIRCASE.build(size, size, spurs)
    result = verify_maze(maze, size, size, config, mode)
    if result is None:
        raise RuntimeError(f"staircase {size}x{size} with {spurs} spurs failed verification")
    return build_level_data(level_id, maze, result[1], config)


def generate_level(level_id: int, mode: str = 'thinking') -> LevelData:
    """Always returns a playable level for level_id"""
    check_mode(mode)
    config = get_difficulty_for_level(level_id, mode)

    level = generate_maze(level_id, config, mode)
    if level is not None:
        return level

    # Fallback: same tier, shifted seed, relabelled as the requested level
    for offset in range(1, GENERATION['fallback_offsets'] + 1):
        seed_id = level_id + offset * GENERATION['fallback_stride']
        fallback = generate_maze(seed_id, config, mode)
        if fallback is not None:
            logger.info("level %d (%s): using fallback seed of level %d", level_id, mode, seed_id)
            return fallback.relabel(level_id)

    logger.warning("level %d (%s): all seeds exhausted, using staircase", level_id, mode)
    return last_resort(level_id, config, mode)


def gen_one(args: Tuple[str, int]) -> Dict:
    """Generate one level (for multiprocessing)"""
    mode, level_id = args
    return generate_level(level_id, mode).to_dict()


def gen_batch(mode: str, level_ids: Iterable[int], processes: Optional[int] = None) -> List[LevelData]:
    """Generate levels in request order, fanned out over a process pool"""
    check_mode(mode)
    args = [(mode, level_id) for level_id in level_ids]
    if not args:
        return []
    if processes == 1:
        results = [gen_one(a) for a in args]
    else:
        with Pool(processes or cpu_count()) as pool:
            results = pool.map(gen_one, args)
    return [LevelData.from_dict(r) for r in results]
