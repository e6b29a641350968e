from typing import Any

from ..config import PINS_PER_FRAME
from ..exceptions import InvalidPins


def validate_pins(raw: Any, *, standing: int = PINS_PER_FRAME) -> int:
    """Parse a single roll entered by the bowler.

    Rules:
    - The value must be an integer (booleans are rejected)
    - It must lie between 0 and ``standing`` inclusive
    """

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(raw, bool):
        raise InvalidPins("Pins must be an integer (not a boolean).")
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        pins = int(raw)
    except (TypeError, ValueError):
        raise InvalidPins("Pins must be an integer.")

    if pins < 0 or pins > standing:
        raise InvalidPins(f"Pins should be between 0 and {standing}.")
    return pins


def validate_frame(first: int, second: int) -> None:
    if first + second > PINS_PER_FRAME:
        raise InvalidPins(
            f"The total of both rolls should not exceed {PINS_PER_FRAME}."
        )
