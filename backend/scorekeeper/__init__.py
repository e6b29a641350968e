"""Ten-pin bowling scorekeeper."""

from .services.session import GameSession
from .exceptions import DomainException, IncompleteGame, RosterFull

__all__ = ["GameSession", "DomainException", "IncompleteGame", "RosterFull"]
