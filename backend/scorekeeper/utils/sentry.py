import logging
import os

import sentry_sdk

from ..config import SENTRY_DSN, SENTRY_ENVIRONMENT

logger = logging.getLogger(__name__)


def _parse_sample_rate(env_var: str, default: float = 0.0) -> float:
    """Read a Sentry sample rate, which the SDK expects in ``[0, 1]``."""
    raw_value = (os.getenv(env_var) or "").strip()
    if not raw_value:
        return default

    try:
        rate = float(raw_value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", env_var, raw_value)
        return default

    if not 0.0 <= rate <= 1.0:
        clamped = min(max(rate, 0.0), 1.0)
        logger.warning("%s=%s is outside [0, 1]; using %.2f", env_var, raw_value, clamped)
        return clamped

    return rate


def init_sentry(dsn: str | None = SENTRY_DSN) -> bool:
    """Start error reporting when a DSN is configured.

    Unhandled exceptions logged at ERROR level are forwarded by the SDK's
    default logging integration.
    """
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    traces_sample_rate = _parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE", default=0.0)
    profiles_sample_rate = _parse_sample_rate(
        "SENTRY_PROFILES_SAMPLE_RATE", default=0.0
    )

    sentry_sdk.init(
        dsn=dsn,
        environment=SENTRY_ENVIRONMENT,
        traces_sample_rate=traces_sample_rate,
        profiles_sample_rate=profiles_sample_rate,
    )
    logger.info(
        "Initialized Sentry%s",
        f" (environment={SENTRY_ENVIRONMENT})" if SENTRY_ENVIRONMENT else "",
    )
    return True
