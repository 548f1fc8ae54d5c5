from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, TextIO

from .config import default_seed
from .generate import random_script
from .robot import Robot


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'not an integer: {text!r}') from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f'must be positive: {text!r}')
    return value


def _lenient_stdin() -> TextIO:
    """stdin with undecodable bytes replaced instead of raising."""
    reconfigure = getattr(sys.stdin, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(errors='replace')
    return sys.stdin


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='roblocks', description='Blocks Problem robot arm simulator')
    parser.add_argument('input', nargs='?', default='-', help='Command script to run (default: stdin)')
    parser.add_argument('--size', type=_positive_int, default=None,
                        help='Table size; when given the script has no size header line')
    parser.add_argument('--generate', type=_positive_int, metavar='COUNT', default=None,
                        help='Print a random script with COUNT moves instead of running one')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for --generate (env: ROBLOCKS_SEED)')
    parser.add_argument('--debug', action='store_true', help='Trace table operations on stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        os.environ['ROBLOCKS_DEBUG'] = '1'

    if args.generate is not None:
        size = args.size if args.size is not None else 10
        seed = args.seed if args.seed is not None else default_seed()
        try:
            lines = random_script(size, args.generate, seed=seed)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        print('\n'.join(lines))
        return 0

    try:
        if args.input == '-':
            Robot.run(_lenient_stdin(), size=args.size)
        else:
            # Undecodable bytes become U+FFFD so the robot reports the line as a bad command.
            with open(args.input, 'r', encoding='utf-8', errors='replace') as f:
                Robot.run(f, size=args.size)
    except OSError as e:
        print(f"error: cannot read {args.input}: {e.strerror or e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0
