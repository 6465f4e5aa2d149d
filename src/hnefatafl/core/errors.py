"""HNFEN decoding errors.

All of them derive from :class:`ValueError` so callers that only care about
"bad input" can catch that.
"""

from __future__ import annotations


class HnfenError(ValueError):
    """Base class for text that cannot be decoded as HNFEN."""


class UnrecognizedTokenError(HnfenError):
    """A side or occupant character outside ``{a, h, K}``."""


class MalformedRankError(HnfenError):
    """A rank that does not describe exactly 11 cells."""


class MalformedBoardError(HnfenError):
    """A board without exactly 11 valid ranks or with a bad side token."""


class MalformedPositionError(HnfenError):
    """A square name that does not match ``<a-k><1-11>``."""


class MalformedMoveError(HnfenError):
    """A move that does not match ``<square><square>``."""
