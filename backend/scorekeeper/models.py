from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class RollLedger:
    """Append-only pin counts for one player in one game.

    Values are not validated here; range checks belong to whoever reads
    input from the bowler.
    """

    _rolls: List[int] = field(default_factory=list)

    def record(self, pins: int) -> None:
        self._rolls.append(pins)

    def all(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    def __len__(self) -> int:
        return len(self._rolls)


@dataclass
class Player:
    name: str
    ledger: RollLedger = field(default_factory=RollLedger)

    @property
    def rolls(self) -> Tuple[int, ...]:
        return self.ledger.all()
