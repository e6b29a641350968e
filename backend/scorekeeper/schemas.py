from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProgressRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    rolls: List[int]


class ScoreRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    frames: List[int] = Field(..., min_length=10, max_length=10)

    @property
    def total(self) -> int:
        return self.frames[-1]


class RankingEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    seat: int = Field(..., ge=0)
    name: str
    score: int


class GameSummary(BaseModel):
    progress: List[ProgressRow]
    scores: List[ScoreRow]
    ranking: List[RankingEntry]
