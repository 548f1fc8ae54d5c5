from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .config import trace
from .errors import BlockNotFound, MoveInProgress
from .pending import PendingMove

Block = int
Position = Tuple[int, int]  # (slot, index within the slot's stack)


class Table:
    """The table of blocks: a fixed row of slots, each holding a stack.

    A new table of size n has slot i holding exactly block i. Slot i is the
    home of block i for the table's whole lifetime. Stacks are stored bottom
    to top, so the last element of a slot is its top block.

    Moves go through a PendingMove obtained from `pile()` or `block()`. While
    one is outstanding the table refuses any other access.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f'Table size must be positive, got {size}')
        self._slots: List[List[Block]] = [[i] for i in range(size)]
        self._where: Dict[Block, Position] = {i: (i, 0) for i in range(size)}
        self._pending: Optional[PendingMove] = None

    @property
    def size(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"Table(size={self.size})"

    # ---------- Lookup ----------

    def locate(self, target: Block) -> Position:
        """Finds the (slot, index) of block `target`."""
        if not isinstance(target, int) or isinstance(target, bool) or not 0 <= target < len(self._slots):
            raise BlockNotFound(target)
        pos = self._where.get(target)
        if pos is None:
            raise BlockNotFound(target)
        slot, idx = pos
        stack = self._slots[slot]
        if idx >= len(stack) or stack[idx] != target:
            # The index is out of step with the slots; never expected.
            raise BlockNotFound(target)
        return pos

    def slots(self) -> Tuple[Tuple[Block, ...], ...]:
        """Immutable snapshot of every slot, bottom to top."""
        self._ensure_idle()
        return tuple(tuple(stack) for stack in self._slots)

    def pile_of(self, block: Block) -> Tuple[Block, ...]:
        """The whole stack currently holding `block`."""
        self._ensure_idle()
        slot, _ = self.locate(block)
        return tuple(self._slots[slot])

    def render(self) -> str:
        """Generates the textual table: one `<slot>: <blocks>` line per slot."""
        self._ensure_idle()
        lines: List[str] = []
        for i, stack in enumerate(self._slots):
            lines.append(f"{i}:" + "".join(f" {b}" for b in stack))
        return "\n".join(lines)

    # ---------- Move initiation ----------

    def begin_pile_move(self, block: Block) -> PendingMove:
        """Starts moving `block` together with every block stacked above it."""
        return self._begin(block, whole_pile=True)

    def begin_block_move(self, block: Block) -> PendingMove:
        """Starts moving `block` alone; blocks above it will be sent home."""
        return self._begin(block, whole_pile=False)

    pile = begin_pile_move
    block = begin_block_move

    def _begin(self, block: Block, whole_pile: bool) -> PendingMove:
        self._ensure_idle()
        slot, idx = self.locate(block)
        move = PendingMove(self, slot, idx, whole_pile)
        self._pending = move
        trace('table', f"begin {'pile' if whole_pile else 'block'} move of {block} at slot {slot}[{idx}]")
        return move

    def _ensure_idle(self) -> None:
        if self._pending is not None:
            raise MoveInProgress('A move is already in progress on this table')

    def _release(self, move: PendingMove) -> None:
        if self._pending is move:
            self._pending = None

    # ---------- Mutation helpers used by PendingMove ----------

    def _split_off(self, slot: int, idx: int) -> List[Block]:
        """Removes and returns everything in `slot` at or above `idx`."""
        stack = self._slots[slot]
        run = stack[idx:]
        del stack[idx:]
        return run

    def _push(self, slot: int, blocks: Iterable[Block]) -> None:
        stack = self._slots[slot]
        for b in blocks:
            self._where[b] = (slot, len(stack))
            stack.append(b)

    def _return_home(self, blocks: Iterable[Block]) -> None:
        for b in blocks:
            trace('table', f"return {b} home")
            self._push(b, (b,))

    def _clear_above(self, slot: int, idx: int) -> None:
        """Sends home every block stacked above position `idx` of `slot`."""
        self._return_home(self._split_off(slot, idx + 1))
