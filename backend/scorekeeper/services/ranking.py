from __future__ import annotations

from typing import Iterable, List, Tuple

from ..schemas import RankingEntry


def rank_scores(scores: Iterable[Tuple[str, int]]) -> List[RankingEntry]:
    """Order ``(name, score)`` pairs from highest to lowest score.

    ``scores`` must be given in seating order. Python's sort is stable, so
    tied players keep that order and receive consecutive ranks.
    """
    seated = list(enumerate(scores))
    ordered = sorted(seated, key=lambda item: item[1][1], reverse=True)
    return [
        RankingEntry(rank=position, seat=seat, name=name, score=score)
        for position, (seat, (name, score)) in enumerate(ordered, start=1)
    ]
