"""Scoring engines for the scorekeeper."""

from . import bowling

__all__ = [
    "bowling",
]
