"""Game session services (pure helpers, no I/O)."""

from .validation import validate_pins, validate_frame
from .ranking import rank_scores
from .session import GameSession

__all__ = [
    "validate_pins",
    "validate_frame",
    "rank_scores",
    "GameSession",
]
