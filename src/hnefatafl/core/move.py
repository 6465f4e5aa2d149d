"""Move value object (HNFEN representation)."""

from __future__ import annotations

from dataclasses import dataclass

from hnefatafl.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single sliding move.

    The moving piece is whatever stands on ``from_sq`` when the move is made.
    """

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def hnfen(self) -> str:
        """HNFEN move text, e.g. ``a11b1``."""
        return str(self)
