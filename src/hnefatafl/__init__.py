"""Hnefatafl rules kernel: HNFEN notation, move generation and captures."""

__version__ = "0.1.0"
