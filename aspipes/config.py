"""Configuration for aspipes."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def get_bool(env_var: str, default: bool) -> bool:
    """Get a boolean flag from environment or return default."""
    raw = os.getenv(env_var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid {env_var}={raw!r}, using default {default}")
    return default


def get_log_level(env_var: str, default: str) -> int:
    """Get a logging level (name or number) from environment or return default."""
    raw = os.getenv(env_var, default).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    logger.warning(f"Invalid {env_var}={raw!r}, using default {default}")
    return logging.getLevelName(default.upper())


# ============================================================================
# Logging
# ============================================================================

# Level used by configure_logging()
LOG_LEVEL = get_log_level("ASPIPES_LOG_LEVEL", "WARNING")

# Emit a DEBUG record for every executed step
TRACE_STEPS = get_bool("ASPIPES_TRACE_STEPS", False)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    The library itself never calls this; applications and test sessions do.

    Args:
        level: Logging level, defaults to LOG_LEVEL

    Returns:
        The ``aspipes`` logger
    """
    package_logger = logging.getLogger("aspipes")
    package_logger.setLevel(LOG_LEVEL if level is None else level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
