"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from hnefatafl.core.enums import PieceKind, Side
from hnefatafl.core.errors import UnrecognizedTokenError

# HNFEN character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "a": (Side.ATTACKER, PieceKind.NORMAL),
    "h": (Side.DEFENDER, PieceKind.NORMAL),
    "K": (Side.DEFENDER, PieceKind.KING),
}

_SYMBOLS: dict[tuple[Side, PieceKind], str] = {
    (Side.ATTACKER, PieceKind.NORMAL): "●",
    (Side.DEFENDER, PieceKind.NORMAL): "○",
    (Side.DEFENDER, PieceKind.KING): "♔",
}

_HNFEN_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for a cell occupant.

    The king always belongs to the defending side, so ``piece.side`` is the
    side a piece moves and captures for.
    """

    side: Side
    kind: PieceKind = PieceKind.NORMAL

    def __post_init__(self) -> None:
        if (self.side, self.kind) not in _HNFEN_CHARS:
            raise ValueError(f"Invalid piece: {self.side.name} {self.kind.name}")

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """HNFEN character ('a' attacker, 'h' defender, 'K' king)."""
        return _HNFEN_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from HNFEN character, e.g. 'K' → king."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise UnrecognizedTokenError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind)

    @property
    def is_king(self) -> bool:
        return self.kind == PieceKind.KING

    @property
    def symbol(self) -> str:
        """Unicode symbol used by the debug dump."""
        return _SYMBOLS[(self.side, self.kind)]


ATTACKER_PIECE = Piece(Side.ATTACKER)
DEFENDER_PIECE = Piece(Side.DEFENDER)
KING = Piece(Side.DEFENDER, PieceKind.KING)
