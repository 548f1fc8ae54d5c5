from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import BadBlockId, BadCommand, ImpossibleMove


@dataclass(frozen=True)
class Block:
    """A single block, named by its id."""
    id: int


@dataclass(frozen=True)
class Pile:
    """The pile currently holding the block `id`."""
    id: int


Target = Union[Block, Pile]


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class PrintTable:
    pass


@dataclass(frozen=True)
class Move:
    source: Target
    dest: Target


Command = Union[Continue, Quit, PrintTable, Move]

_SOURCE_VERBS = {'move': Block, 'pile': Pile}
_DEST_VERBS = {'onto': Block, 'over': Pile}


def parse_block_id(token: str) -> int:
    """Parses a block id; it must be a non-negative integer."""
    if not (token.isascii() and token.isdigit()):
        raise BadBlockId(token)
    return int(token)


def parse_command(line: str) -> Command:
    """Parses one input line into a command.

    Accepted forms (case-insensitive):
      ""                          -> Continue
      "quit"                      -> Quit
      "print"                     -> PrintTable
      "move|pile <a> onto|over <b>" -> Move(Block|Pile(a), Block|Pile(b))
    """
    text = line.strip().lower()
    if text == '':
        return Continue()
    if text == 'quit':
        return Quit()
    if text == 'print':
        return PrintTable()

    words = text.split()
    if len(words) != 4:
        raise BadCommand(line.strip())
    verb, a, prep, b = words
    source_kind = _SOURCE_VERBS.get(verb)
    dest_kind = _DEST_VERBS.get(prep)
    if source_kind is None or dest_kind is None:
        raise BadCommand(line.strip())

    src_id = parse_block_id(a)
    dst_id = parse_block_id(b)
    if src_id == dst_id:
        raise ImpossibleMove()
    return Move(source_kind(src_id), dest_kind(dst_id))


def format_command(cmd: Command) -> str:
    """Renders a command back into the text form `parse_command` accepts."""
    if isinstance(cmd, Continue):
        return ''
    if isinstance(cmd, Quit):
        return 'quit'
    if isinstance(cmd, PrintTable):
        return 'print'
    if isinstance(cmd, Move):
        verb = 'pile' if isinstance(cmd.source, Pile) else 'move'
        prep = 'over' if isinstance(cmd.dest, Pile) else 'onto'
        return f"{verb} {cmd.source.id} {prep} {cmd.dest.id}"
    raise TypeError(f'Not a command: {cmd!r}')


def parse_table_size(line: str) -> int:
    """Parses the first script line: the number of blocks on the table."""
    text = line.strip()
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f'Invalid table size: {text!r}')
    size = int(text)
    if size <= 0:
        raise ValueError(f'Invalid table size: {text!r}')
    return size
