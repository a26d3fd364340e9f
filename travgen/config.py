"""Configuration for travgen."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Subsector grid
SUBSECTOR_COLUMNS = 8
SUBSECTOR_ROWS = 10
PRESENCE_THRESHOLD = 4  # 1d6 + density DM must reach this for a world

# Generation
DEFAULT_WORLD_COUNT = 10
DEFAULT_DENSITY = "spiral"


def parse_seed(raw: Optional[str]) -> Optional[int]:
    """Seed from an environment value; blank or non-integer means unseeded."""
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring TRAVGEN_SEED={raw!r}: not an integer")
        return None


def parse_log_level(raw: Optional[str], default: str = "WARNING") -> str:
    """Log level name from an environment value, falling back to ``default``."""
    level = (raw or "").strip().upper()
    if level in logging.getLevelNamesMapping():
        return level
    if level:
        logger.warning(f"Ignoring TRAVGEN_LOG_LEVEL={raw!r}: unknown level")
    return default


DEFAULT_SEED = parse_seed(os.environ.get("TRAVGEN_SEED"))  # None means unseeded

# Logging
LOG_LEVEL = parse_log_level(os.environ.get("TRAVGEN_LOG_LEVEL"))
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
