from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, TextIO

from .command import Block, Continue, Move, Pile, PrintTable, Quit, Target, parse_command, parse_table_size
from .config import trace
from .errors import BlockNotFound, CommandError
from .table import Table


class Robot:
    """Reads commands line by line and manipulates the blocks on a Table.

    The first line of a script is the table size. Every following line is a
    command: `print`, `quit`, or `move|pile <a> onto|over <b>`. Bad commands
    print a one-line message on the error stream and the robot carries on.
    `quit` (or running out of input) prints the table and stops.
    """

    def __init__(self, table: Table, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.table = table
        self.out = out
        self.err = err
        self.finished = False

    @classmethod
    def run(
        cls,
        lines: Iterable[str],
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        size: Optional[int] = None,
    ) -> 'Robot':
        """Builds a robot from a script and runs it to the end.

        When `size` is given the script has no size header line.
        Raises ValueError when the size header is missing or invalid.
        """
        it: Iterator[str] = iter(lines)
        if size is None:
            header = next(it, None)
            if header is None:
                raise ValueError('Missing table size: input is empty')
            size = parse_table_size(header)
        robot = cls(Table(size), out=out, err=err)
        trace('robot', f"table of {size} blocks")
        robot.main_loop(it)
        return robot

    def main_loop(self, lines: Iterable[str]) -> None:
        for line in lines:
            if not self.execute(line):
                return
        # Input ended without a quit command.
        self.finish()

    def execute(self, line: str) -> bool:
        """Processes one line. Returns False once the robot has quit."""
        if self.finished:
            return False
        try:
            cmd = parse_command(line)
        except CommandError as e:
            self._report(e)
            return True

        if isinstance(cmd, Continue):
            return True
        if isinstance(cmd, Quit):
            self.finish()
            return False
        if isinstance(cmd, PrintTable):
            self.print_table()
            return True
        if isinstance(cmd, Move):
            try:
                self.handle_move(cmd.source, cmd.dest)
            except BlockNotFound as e:
                self._report(e)
        return True

    def finish(self) -> None:
        if not self.finished:
            self.print_table()
            self.finished = True

    def print_table(self) -> None:
        print(self.table.render(), file=self.out or sys.stdout)

    def handle_move(self, source: Target, dest: Target) -> bool:
        """Executes a move; returns False if source and dest share a pile.

        * A Pile source picks up the block and everything above it.
        * A Block source first sends the blocks above it home.
        * A Pile destination stacks on top of the pile (`over`).
        * A Block destination first sends the blocks above it home (`onto`).
        """
        if isinstance(source, Pile):
            move = self.table.pile(source.id)
        elif isinstance(source, Block):
            move = self.table.block(source.id)
        else:
            raise TypeError(f'Not a move target: {source!r}')

        with move:
            if isinstance(dest, Pile):
                return move.over(dest.id)
            if isinstance(dest, Block):
                return move.onto(dest.id)
            raise TypeError(f'Not a move target: {dest!r}')

    def _report(self, error: Exception) -> None:
        print(str(error), file=self.err or sys.stderr)
