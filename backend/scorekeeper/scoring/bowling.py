"""Ten-pin bowling frame scoring engine."""
from typing import List, Sequence

from ..config import FRAMES_PER_GAME, PINS_PER_FRAME
from ..exceptions import IncompleteGame


def _read(rolls: Sequence[int], index: int, frame: int) -> int:
    if index >= len(rolls):
        raise IncompleteGame(frame, len(rolls))
    return rolls[index]


def frame_totals(rolls: Sequence[int]) -> List[int]:
    """Return the cumulative score after each of the ten frames.

    A strike adds the next two rolls and advances one roll; any other frame
    takes two rolls and a spare adds the roll after them. The tenth frame
    gets no special treatment, so its bonus rolls must already be recorded.
    Raises ``IncompleteGame`` instead of reading past the recorded rolls.
    """
    totals: List[int] = []
    cumulative = 0
    cursor = 0

    for frame in range(1, FRAMES_PER_GAME + 1):
        first = _read(rolls, cursor, frame)
        if first == PINS_PER_FRAME:  # strike
            value = first + _read(rolls, cursor + 1, frame) + _read(rolls, cursor + 2, frame)
            cursor += 1
        else:
            value = first + _read(rolls, cursor + 1, frame)
            if value == PINS_PER_FRAME:  # spare
                value += _read(rolls, cursor + 2, frame)
            cursor += 2
        cumulative += value
        totals.append(cumulative)

    return totals


def is_complete(rolls: Sequence[int]) -> bool:
    try:
        frame_totals(rolls)
    except IncompleteGame:
        return False
    return True
