from __future__ import annotations

import os
import sys
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    """Reads a boolean environment flag such as ROBLOCKS_DEBUG=1."""
    return os.getenv(name, default).strip().lower() in _TRUTHY


def debug_enabled() -> bool:
    return env_flag('ROBLOCKS_DEBUG')


def default_seed() -> Optional[int]:
    """Seed for generated scripts taken from ROBLOCKS_SEED, if it is an integer."""
    raw = os.getenv('ROBLOCKS_SEED')
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"warning: ignoring non-integer ROBLOCKS_SEED={raw!r}", file=sys.stderr)
        return None


def trace(tag: str, message: str) -> None:
    """Prints a debug line to stderr when ROBLOCKS_DEBUG is set."""
    if debug_enabled():
        print(f"[{tag}] {message}", file=sys.stderr)
