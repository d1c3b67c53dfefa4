import logging
import sys
from typing import Optional

from app.core.config import LOG_LEVEL

_INITIALIZED = False


def init_logging(level: Optional[str] = None) -> None:
    """Attach a single stdout handler to the root logger (idempotent)."""
    global _INITIALIZED
    if _INITIALIZED:
        return

    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        root_logger.addHandler(handler)

    _INITIALIZED = True
