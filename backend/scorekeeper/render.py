"""Fixed-width text tables for the console menu."""

from typing import Iterable, List

from .schemas import GameSummary, ProgressRow, RankingEntry, ScoreRow


def _roll_cells(rolls: Iterable[int]) -> str:
    return "".join(f"{pins:>2} " for pins in rolls)


def render_rolls(rows: Iterable[ProgressRow]) -> List[str]:
    return [f"{row.name}:\t{_roll_cells(row.rolls)}" for row in rows]


def render_progress(rows: Iterable[ProgressRow]) -> str:
    lines = ["Game Progress", *render_rolls(rows), ""]
    return "\n".join(lines) + "\n"


def render_scores(rows: Iterable[ScoreRow]) -> str:
    lines = ["Current Scores"]
    for row in rows:
        cells = "".join(f"{total:>3} " for total in row.frames)
        lines.append(f"{row.name}:\t{cells}")
    lines.append("")
    return "\n".join(lines) + "\n"


def render_ranking(entries: Iterable[RankingEntry]) -> str:
    lines = ["Player Ranking"]
    lines.extend(f"{e.rank}. {e.name}: {e.score} points" for e in entries)
    return "\n".join(lines) + "\n"


def render_summary(summary: GameSummary) -> str:
    head = "\n".join(["Game Summary", *render_rolls(summary.progress), ""]) + "\n"
    return head + render_scores(summary.scores) + render_ranking(summary.ranking)
