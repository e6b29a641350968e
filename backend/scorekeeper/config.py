import logging
import os

MAX_PLAYERS = 5
FRAMES_PER_GAME = 10
PINS_PER_FRAME = 10


def _canon_log_level(val):
    """
    Normalize a log level name so ``logging`` accepts it:
      - defaults to 'WARNING' when unset/empty
      - upper-cases the value
      - falls back to 'WARNING' for names ``logging`` does not know
    """
    val = (val or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(val), int):
        return "WARNING"
    return val

LOG_LEVEL = _canon_log_level(os.getenv("SCOREKEEPER_LOG_LEVEL"))

SENTRY_DSN = os.getenv("SENTRY_DSN")
SENTRY_ENVIRONMENT = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
