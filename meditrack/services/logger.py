import json
import logging

from meditrack.core.config import settings

_debug_log = logging.getLogger("meditrack.debug")


def configure_logging(level: str | None = None):
    """Root logging setup, called once from the app startup hook."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def log_debug(event: str, data: dict):
    """
    Logs structured debug info if enabled.
    """
    if not settings.AI_DEBUG_MODE:
        return

    _debug_log.info("[DEBUG] %s: %s", event, json.dumps(data, indent=2, default=str, ensure_ascii=False))
