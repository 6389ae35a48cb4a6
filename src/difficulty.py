#!/usr/bin/env python3
"""
DIFFICULTY TABLES
Level id -> tier -> DifficultyConfig, one tier table per game mode.
Also the small gameplay constants that hang off a tier (undo count,
star thresholds).
"""
from dataclasses import dataclass
from typing import Dict, List

THINKING = 'thinking'
RELAXING = 'relaxing'
MODES = (THINKING, RELAXING)

LEVELS_PER_MODE = 4000


@dataclass(frozen=True)
class DifficultyConfig:
    name: str
    grid_size: int
    min_moves: int
    max_moves: int


@dataclass(frozen=True)
class DifficultyTier:
    name: str
    start_level: int
    end_level: int

    def contains(self, level_id: int) -> bool:
        return self.start_level <= level_id <= self.end_level


# === TACTICAL ("thinking") MODE ===
THINKING_DIFFICULTIES = {
    'Easy': DifficultyConfig('Easy', 7, 4, 7),
    'Medium': DifficultyConfig('Medium', 9, 6, 10),
    'Hard': DifficultyConfig('Hard', 11, 8, 14),
    'Expert': DifficultyConfig('Expert', 13, 10, 18),
    'Master': DifficultyConfig('Master', 13, 14, 22),
    'Legend': DifficultyConfig('Legend', 15, 16, 26),
    'Impossible': DifficultyConfig('Impossible', 15, 20, 30),
}

THINKING_TIERS = [
    DifficultyTier('Easy', 1, 200),
    DifficultyTier('Medium', 201, 600),
    DifficultyTier('Hard', 601, 1200),
    DifficultyTier('Expert', 1201, 2200),
    DifficultyTier('Master', 2201, 3000),
    DifficultyTier('Legend', 3001, 3600),
    DifficultyTier('Impossible', 3601, 4000),
]

# === FLOW ("relaxing") MODE ===
RELAXING_DIFFICULTIES = {
    'Easy': DifficultyConfig('Easy', 7, 3, 6),
    'Medium': DifficultyConfig('Medium', 9, 5, 9),
    'Hard': DifficultyConfig('Hard', 11, 6, 12),
    'Expert': DifficultyConfig('Expert', 13, 8, 15),
    'Master': DifficultyConfig('Master', 13, 10, 18),
    'Legend': DifficultyConfig('Legend', 15, 12, 22),
}

RELAXING_TIERS = [
    DifficultyTier('Easy', 1, 300),
    DifficultyTier('Medium', 301, 800),
    DifficultyTier('Hard', 801, 1500),
    DifficultyTier('Expert', 1501, 2500),
    DifficultyTier('Master', 2501, 3200),
    DifficultyTier('Legend', 3201, 4000),
]

# === PER-MODE GENERATION SETTINGS ===
# junction_ratio: required junctions as a fraction of min_moves
# strategy_weights: relative odds of each construction strategy per attempt
MODE_SETTINGS = {
    THINKING: {
        'difficulties': THINKING_DIFFICULTIES,
        'tiers': THINKING_TIERS,
        'junction_ratio': 0.25,
        'strategy_weights': {
            'branching': 0.35,
            'room': 0.35,
            'lattice': 0.30,
        },
    },
    RELAXING: {
        'difficulties': RELAXING_DIFFICULTIES,
        'tiers': RELAXING_TIERS,
        'junction_ratio': 0.10,
        'strategy_weights': {
            'relaxing_room': 0.40,
            'room': 0.20,
            'lattice': 0.20,
            'branching': 0.20,
        },
    },
}

# Undo allowance per tier in thinking mode; relaxing mode is unlimited
UNDO_COUNTS = {
    'Easy': 5,
    'Medium': 5,
    'Hard': 4,
    'Expert': 4,
    'Master': 3,
    'Legend': 3,
    'Impossible': 3,
}
UNLIMITED_UNDO = 99

# Star thresholds as moves / target_moves
STAR_THRESHOLDS = {
    3: 1.0,
    2: 1.5,
}


def check_mode(mode: str) -> str:
    if mode not in MODE_SETTINGS:
        raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")
    return mode


def validate_tiers(tiers: List[DifficultyTier]) -> List[DifficultyTier]:
    """Tiers must start at level 1 and cover the range without gaps or overlap."""
    if not tiers:
        raise ValueError("empty tier table")
    expected = 1
    for tier in tiers:
        if tier.start_level != expected:
            raise ValueError(f"tier {tier.name!r} starts at {tier.start_level}, expected {expected}")
        if tier.end_level < tier.start_level:
            raise ValueError(f"tier {tier.name!r} ends before it starts")
        expected = tier.end_level + 1
    return tiers


def get_difficulty_tiers(mode: str) -> List[DifficultyTier]:
    return MODE_SETTINGS[check_mode(mode)]['tiers']


def get_tier_for_level(level_id: int, mode: str = THINKING) -> DifficultyTier:
    tiers = get_difficulty_tiers(mode)
    for tier in tiers:
        if tier.contains(level_id):
            return tier
    # Past the table: the last tier continues
    return tiers[-1] if level_id > tiers[-1].end_level else tiers[0]


def get_difficulty_for_level(level_id: int, mode: str = THINKING) -> DifficultyConfig:
    tier = get_tier_for_level(level_id, mode)
    difficulties: Dict[str, DifficultyConfig] = MODE_SETTINGS[mode]['difficulties']
    return difficulties[tier.name]


def get_undo_count(level_id: int, mode: str) -> int:
    if check_mode(mode) == RELAXING:
        return UNLIMITED_UNDO
    return UNDO_COUNTS.get(get_tier_for_level(level_id, mode).name, 5)


def calculate_stars(moves: int, target_moves: int) -> int:
    """3 stars at or under target, 2 up to 1.5x, otherwise 1"""
    if target_moves <= 0:
        return 3
    ratio = moves / target_moves
    if ratio <= STAR_THRESHOLDS[3]:
        return 3
    if ratio <= STAR_THRESHOLDS[2]:
        return 2
    return 1


for _settings in MODE_SETTINGS.values():
    validate_tiers(_settings['tiers'])
