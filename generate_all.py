#!/usr/bin/env python3
"""
Pre-generate a range of levels for one mode and save them as JSON
"""

import argparse
import json
import logging
import time
from multiprocessing import cpu_count
from typing import Dict, List, Optional, Sequence

from difficulty import LEVELS_PER_MODE, MODES
from level_generator import gen_batch
from maze_pieces import LevelData


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate Chroma Slide levels to a JSON file.")
    p.add_argument("--mode", choices=MODES, default="thinking")
    p.add_argument("--start", type=int, default=1, help="First level id.")
    p.add_argument("--count", type=int, default=100, help="How many levels to generate.")
    p.add_argument("--processes", type=int, default=None,
                   help="Worker processes (default: all cores, 1 = no pool).")
    p.add_argument("--out", default=None, help="Output path (default: levels_<mode>.json).")
    p.add_argument("--verbose", action="store_true", help="Log every rejected attempt.")
    return p.parse_args(argv)


def level_ids(start: int, count: int) -> List[int]:
    end = min(start + count - 1, LEVELS_PER_MODE)
    return list(range(max(1, start), end + 1))


def summarize(levels: List[LevelData]) -> Dict[str, Dict]:
    """Per-difficulty count and move range"""
    tiers: Dict[str, Dict] = {}
    for lv in levels:
        t = tiers.setdefault(lv.difficulty, {'count': 0, 'min': lv.target_moves, 'max': lv.target_moves})
        t['count'] += 1
        t['min'] = min(t['min'], lv.target_moves)
        t['max'] = max(t['max'], lv.target_moves)
    return tiers


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    ids = level_ids(args.start, args.count)
    out = args.out or f"levels_{args.mode}.json"

    print(f"Chroma Slide level generation ({args.mode})")
    print(f"Levels {ids[0] if ids else '-'}..{ids[-1] if ids else '-'}, CPU cores: {cpu_count()}")

    start = time.time()
    levels = gen_batch(args.mode, ids, args.processes)
    elapsed = time.time() - start

    with open(out, 'w') as f:
        json.dump([lv.to_dict() for lv in levels], f)

    print(f"\n=== COMPLETE ===")
    print(f"Total levels: {len(levels)}")
    print(f"Time: {elapsed:.1f}s")
    for name, t in summarize(levels).items():
        print(f"  {name}: {t['count']} levels, {t['min']}-{t['max']} moves")
    print(f"Saved: {out}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
