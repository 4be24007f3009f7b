"""
Errors raised by the game engine.
"""

from enum import Enum


class RejectReason(Enum):
    """Why a move was not applied."""
    ALREADY_WON = "already_won"
    CELL_OCCUPIED = "cell_occupied"
    OUT_OF_RANGE = "out_of_range"


class GameError(Exception):
    """Base class for game errors."""


class MoveRejected(GameError):
    """A move was not applied. The game state is unchanged."""

    reason: RejectReason

    def __init__(self, message: str, reason: RejectReason):
        super().__init__(message)
        self.reason = reason


class CellOccupied(MoveRejected):
    """The move targets a cell that already has a mark."""

    def __init__(self, index: int):
        super().__init__(f"Cell {index} is already occupied", RejectReason.CELL_OCCUPIED)
        self.index = index


class GameAlreadyWon(MoveRejected):
    """A move was attempted after the game was won."""

    def __init__(self, winner):
        super().__init__(f"Game is already won by {winner}", RejectReason.ALREADY_WON)
        self.winner = winner


class IndexOutOfRange(GameError, IndexError):
    """A cell index or history step is outside the valid range."""

    def __init__(self, what: str, value, upper: int):
        super().__init__(f"{what} {value!r} out of range (0-{upper})")
        self.value = value
        self.upper = upper
