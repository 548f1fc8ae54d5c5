#!/usr/bin/env python3
"""
Run many random command scripts and check that no block is ever lost or duplicated.

Usage:
  python tools/stress_check.py              # 100 runs, 12 blocks, 500 moves
  python tools/stress_check.py 1000 25 2000 # runs, size, moves per run
"""
from __future__ import annotations
import os, sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from roblocks import Robot, Table, random_moves  # noqa: E402


def check_table(table: Table) -> str:
    """Returns an empty string when every block is on the table exactly once."""
    flat = [b for stack in table.slots() for b in stack]
    if sorted(flat) != list(range(table.size)):
        return f"blocks out of place: {sorted(flat)}"
    return ""


def main() -> int:
    runs = int(sys.argv[1]) if len(sys.argv) > 1 else 100
    size = int(sys.argv[2]) if len(sys.argv) > 2 else 12
    moves = int(sys.argv[3]) if len(sys.argv) > 3 else 500
    failures = 0
    noops = 0
    for seed in range(runs):
        robot = Robot(Table(size))
        for i, mv in enumerate(random_moves(size, moves, seed=seed)):
            if not robot.handle_move(mv.source, mv.dest):
                noops += 1
            problem = check_table(robot.table)
            if problem:
                failures += 1
                print(f"seed={seed} move#{i} {mv}: {problem}", file=sys.stderr)
                break
    print(f"runs={runs} size={size} moves={moves} same_pile_noops={noops} failures={failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
