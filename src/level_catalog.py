#!/usr/bin/env python3
"""
LEVEL CATALOG
Owns the (mode, level id) -> LevelData cache. Levels are generated on
first request and never change afterwards.
"""
import logging
from typing import Dict, Iterable, Optional, Tuple

from difficulty import LEVELS_PER_MODE, THINKING, check_mode
from level_generator import gen_batch, generate_level
from maze_pieces import LevelData

logger = logging.getLogger(__name__)


class LevelCatalog:
    def __init__(self, total_levels: int = LEVELS_PER_MODE):
        self.max_level = total_levels
        self.generated = 0
        self._levels: Dict[Tuple[str, int], LevelData] = {}

    def __len__(self):
        return len(self._levels)

    def __contains__(self, key):
        return key in self._levels

    def total_levels(self) -> int:
        return self.max_level

    def in_range(self, level_id: int) -> bool:
        return 1 <= level_id <= self.max_level

    def get_or_generate(self, level_id: int, mode: str) -> LevelData:
        key = (check_mode(mode), level_id)
        level = self._levels.get(key)
        if level is None:
            level = generate_level(level_id, mode)
            self.generated += 1
            # Generation is deterministic, so a racing insert holds the same level
            level = self._levels.setdefault(key, level)
        return level

    def get_level_by_id(self, level_id: int, mode: str = THINKING) -> Optional[LevelData]:
        """None only for ids outside 1..total_levels"""
        check_mode(mode)
        if not self.in_range(level_id):
            return None
        return self.get_or_generate(level_id, mode)

    def preload(self, mode: str, level_ids: Iterable[int], processes: Optional[int] = None) -> int:
        """Generate every missing level in level_ids; returns how many were added"""
        check_mode(mode)
        missing = [i for i in level_ids if self.in_range(i) and (mode, i) not in self._levels]
        added = 0
        for level in gen_batch(mode, missing, processes):
            if self._levels.setdefault((mode, level.id), level) is level:
                added += 1
        self.generated += len(missing)
        logger.info("preloaded %d %s levels", added, mode)
        return added

    def clear(self):
        self._levels.clear()
