from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """Printable description of a failed scorekeeper operation."""

    title: str
    detail: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.code = code

    def to_problem(self) -> ProblemDetail:
        return ProblemDetail(title=self.title, detail=self.detail, code=self.code)


class RosterFull(DomainException):
    def __init__(self, limit: int) -> None:
        super().__init__(
            title="Roster full",
            detail=f"Maximum number of players reached ({limit}).",
            code="roster_full",
        )
        self.limit = limit


class PlayerNotFound(DomainException):
    def __init__(self, seat: int) -> None:
        super().__init__(
            title="Player not found",
            detail=f"no player is seated at position {seat}",
            code="player_not_found",
        )
        self.seat = seat


class IncompleteGame(DomainException):
    def __init__(self, frame: int, rolls_recorded: int) -> None:
        super().__init__(
            title="Incomplete game",
            detail=(
                f"frame {frame} cannot be scored yet: "
                f"only {rolls_recorded} roll(s) recorded"
            ),
            code="incomplete_game",
        )
        self.frame = frame
        self.rolls_recorded = rolls_recorded


class InvalidPins(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(title="Invalid pins", detail=detail, code="invalid_pins")
