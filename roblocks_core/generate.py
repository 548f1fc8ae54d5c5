from __future__ import annotations

import random
from typing import Iterator, List, Optional

from .command import Block, Move, Pile, format_command

PRINT_EVERY = 10


def random_moves(size: int, count: int, seed: Optional[int] = None) -> Iterator[Move]:
    """Yields `count` random moves with two distinct block ids below `size`."""
    if size < 2:
        raise ValueError('Need at least two blocks to generate moves')
    rng = random.Random(seed)
    for _ in range(count):
        a, b = rng.sample(range(size), 2)
        source = Pile(a) if rng.random() < 0.5 else Block(a)
        dest = Pile(b) if rng.random() < 0.5 else Block(b)
        yield Move(source, dest)


def random_script(size: int, count: int, seed: Optional[int] = None) -> List[str]:
    """Creates a complete script: size header, moves with periodic prints, then quit."""
    lines: List[str] = [str(size)]
    for i, move in enumerate(random_moves(size, count, seed), start=1):
        lines.append(format_command(move))
        if i % PRINT_EVERY == 0:
            lines.append('print')
    lines.append('quit')
    return lines
