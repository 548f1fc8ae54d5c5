from __future__ import annotations

from typing import TYPE_CHECKING, List

from .config import trace
from .errors import MoveConsumed

if TYPE_CHECKING:
    from .table import Table


class PendingMove:
    """A move that has picked its source and is waiting for a destination.

    Produced by `Table.pile()` / `Table.block()`. It must be finished with
    exactly one call to `onto()` or `over()`, or released with `discard()`.
    Until then it is the only thing allowed to touch the table.
    """

    def __init__(self, table: 'Table', from_slot: int, from_idx: int, move_pile: bool):
        self._table = table
        self.from_slot = from_slot
        self.from_idx = from_idx
        self.move_pile = move_pile
        self._done = False

    def __repr__(self) -> str:
        kind = 'pile' if self.move_pile else 'block'
        state = 'done' if self._done else 'pending'
        return f"PendingMove({kind}, slot={self.from_slot}, idx={self.from_idx}, {state})"

    def __enter__(self) -> 'PendingMove':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._done:
            self.discard()

    @property
    def done(self) -> bool:
        return self._done

    def over(self, to: int) -> bool:
        """Stacks the moving block(s) on top of the pile containing block `to`.

        Returns False, leaving the table untouched, when `to` is already in
        the source pile.
        """
        table = self._consume()
        try:
            to_slot, _ = table.locate(to)
            if to_slot == self.from_slot:
                trace('move', f"over {to}: same slot {to_slot}, nothing to do")
                return False
            moving = self._take_moving_pile()
            table._push(to_slot, moving)
            trace('move', f"{moving} over {to} -> slot {to_slot}")
            return True
        finally:
            table._release(self)

    def onto(self, to: int) -> bool:
        """Stacks the moving block(s) directly on block `to`.

        Blocks above `to` are first returned to their home slots. Returns
        False, leaving the table untouched, when `to` is in the source pile.
        """
        table = self._consume()
        try:
            to_slot, to_idx = table.locate(to)
            if to_slot == self.from_slot:
                trace('move', f"onto {to}: same slot {to_slot}, nothing to do")
                return False
            moving = self._take_moving_pile()
            table._clear_above(to_slot, to_idx)
            table._push(to_slot, moving)
            trace('move', f"{moving} onto {to} -> slot {to_slot}")
            return True
        finally:
            table._release(self)

    def discard(self) -> None:
        """Releases the table without moving anything."""
        self._consume()._release(self)

    def _consume(self) -> 'Table':
        if self._done:
            raise MoveConsumed('This move has already been completed')
        self._done = True
        return self._table

    def _take_moving_pile(self) -> List[int]:
        """Gets the run being moved; a single block move first sends the blocks above it home."""
        table = self._table
        if not self.move_pile:
            table._clear_above(self.from_slot, self.from_idx)
        return table._split_off(self.from_slot, self.from_idx)
