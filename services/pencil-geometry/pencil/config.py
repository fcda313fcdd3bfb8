import os
import logging
from dotenv import load_dotenv
from .stroke_engine.geometry import DEFAULT_NEAR_THRESHOLD

load_dotenv()

logger = logging.getLogger("pencil.config")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using default %s", name, raw, default)
        return default


def eraser_threshold() -> float:
    """Threshold used by the HTTP layer when a request does not send one."""
    return _float_env("PENCIL_ERASER_THRESHOLD", DEFAULT_NEAR_THRESHOLD)


def configure_logging() -> None:
    level = os.getenv("PENCIL_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown PENCIL_LOG_LEVEL %r; using INFO", level)
        level = "INFO"
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("pencil").setLevel(level)
