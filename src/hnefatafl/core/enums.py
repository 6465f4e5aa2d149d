"""Core enumerations for the tafl domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side of the board. Attackers move first."""

    ATTACKER = 0
    DEFENDER = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Kinds of occupant a cell may hold."""

    NORMAL = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game as far as escape and king capture decide it."""

    IN_PROGRESS = 0
    ATTACKER_WINS = 1
    DEFENDER_WINS = 2
