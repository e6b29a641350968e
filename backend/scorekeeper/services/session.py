import logging
from typing import List, Optional, Tuple

from ..config import MAX_PLAYERS
from ..exceptions import IncompleteGame, PlayerNotFound, RosterFull
from ..models import Player
from ..schemas import GameSummary, ProgressRow, RankingEntry, ScoreRow
from ..scoring import bowling
from .ranking import rank_scores

logger = logging.getLogger(__name__)


class GameSession:
    """Roster of up to five bowlers and their roll ledgers for one game."""

    def __init__(self, max_players: int = MAX_PLAYERS) -> None:
        self.max_players = max_players
        self._players: List[Player] = []

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    @property
    def is_full(self) -> bool:
        return len(self._players) >= self.max_players

    @property
    def is_complete(self) -> bool:
        """True once every seated player has rolls for all ten frames."""
        return bool(self._players) and all(
            bowling.is_complete(p.rolls) for p in self._players
        )

    def add_player(self, name: str) -> Player:
        if self.is_full:
            logger.info("Roster full; rejecting player %r", name)
            raise RosterFull(self.max_players)
        player = Player(name=name)
        self._players.append(player)
        logger.debug("Added player %r at seat %d", name, len(self._players) - 1)
        return player

    def submit_roll(self, pins: int, seat: Optional[int] = None) -> None:
        """Record ``pins`` for the player at ``seat``, or for everyone.

        Without a seat the roll is broadcast to every ledger. Pin counts are
        not range checked here.
        """
        if seat is None:
            for player in self._players:
                player.ledger.record(pins)
            logger.debug("Recorded %d pins for all %d players", pins, len(self._players))
            return
        if not 0 <= seat < len(self._players):
            raise PlayerNotFound(seat)
        self._players[seat].ledger.record(pins)
        logger.debug("Recorded %d pins for seat %d", pins, seat)

    def progress_snapshot(self) -> List[ProgressRow]:
        return [ProgressRow(name=p.name, rolls=list(p.rolls)) for p in self._players]

    def score_snapshot(self) -> List[ScoreRow]:
        rows: List[ScoreRow] = []
        for player in self._players:
            try:
                frames = bowling.frame_totals(player.rolls)
            except IncompleteGame:
                logger.info("Scores requested before %r finished", player.name)
                raise
            rows.append(ScoreRow(name=player.name, frames=frames))
        return rows

    def ranking(self) -> List[RankingEntry]:
        return self._rank(self.score_snapshot())

    def summary(self) -> GameSummary:
        scores = self.score_snapshot()
        return GameSummary(
            progress=self.progress_snapshot(),
            scores=scores,
            ranking=self._rank(scores),
        )

    @staticmethod
    def _rank(scores: List[ScoreRow]) -> List[RankingEntry]:
        return rank_scores((row.name, row.total) for row in scores)
