from __future__ import annotations


class RoblocksError(Exception):
    """Base class for every error raised by roblocks."""


class BlockNotFound(RoblocksError, LookupError):
    def __init__(self, block: int):
        super().__init__(block)
        self.block = block

    def __str__(self) -> str:
        return f"Block not found: {self.block}"


class MoveInProgress(RoblocksError, RuntimeError):
    """Raised when the table is touched while a pending move holds it."""


class MoveConsumed(MoveInProgress):
    """Raised when a pending move is used after completion or discard."""


class CommandError(RoblocksError, ValueError):
    """A command line that cannot be turned into a valid command."""


class BadBlockId(CommandError):
    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"Invalid block id: {self.token}"


class BadCommand(CommandError):
    def __init__(self, line: str):
        super().__init__(line)
        self.line = line

    def __str__(self) -> str:
        return f"Invalid command: {self.line}"


class ImpossibleMove(CommandError):
    def __str__(self) -> str:
        return "Cannot move a block onto/over itself"
