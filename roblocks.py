from __future__ import annotations

# Facade module that re-exports the roblocks core.
# Tests and scripts import from here; the single-responsibility modules
# live under roblocks_core/*.

from roblocks_core.errors import (
    RoblocksError,
    BlockNotFound,
    MoveInProgress,
    MoveConsumed,
    CommandError,
    BadBlockId,
    BadCommand,
    ImpossibleMove,
)
from roblocks_core.table import Table, Position
from roblocks_core.pending import PendingMove
from roblocks_core.command import (
    Block,
    Pile,
    Target,
    Continue,
    Quit,
    PrintTable,
    Move,
    Command,
    parse_block_id,
    parse_command,
    format_command,
    parse_table_size,
)
from roblocks_core.robot import Robot
from roblocks_core.generate import random_moves, random_script
from roblocks_core.config import debug_enabled, default_seed


def main() -> int:
    # CLI driver delegated to roblocks_core.cli
    from roblocks_core.cli import main as _main
    return _main()


if __name__ == '__main__':
    raise SystemExit(main())
