# src/common/logging_utils.py

import logging
import os
from typing import Any, Optional

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (deck/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_card_event(
    logger: logging.Logger,
    op: str,                      # "set_rank" / "set_suit" / "set_all"
    card: Any,
    accepted: bool,
    attempted: Optional[Any] = None,
) -> None:
    """
    Unified card mutation log.
    Rejected operations log at WARNING, accepted ones at DEBUG.
    """
    level = logging.DEBUG if accepted else logging.WARNING

    base = f"[{op}] {'ok' if accepted else 'rejected'} card={card!r}"
    if attempted is not None:
        base += f" | attempted={attempted!r}"
    logger.log(level, base)
