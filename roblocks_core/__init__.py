"""
roblocks core Python package.

This package contains the table of blocks and the pieces that drive it.
Modules:
- table.py: Table (slots, lookup, rendering, move initiation)
- pending.py: PendingMove (onto/over completion)
- command.py: command values and the line parser
- robot.py: Robot, the line-by-line driver
- generate.py: seeded random command scripts
- cli.py: argparse entry point
"""
