"""Logging configuration."""

import logging
import sys
from typing import Optional

from portfolio_ledger.config.settings import get_settings

LEDGER_LOGGER = "portfolio_ledger"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def setup_logging() -> None:
    """
    Configure application logging.

    The root logger follows ``log_level``. Ledger modules log under
    ``portfolio_ledger`` and follow ``ledger_log_level`` when it is set, so
    settlement and rejection messages can be turned up or down on their own.
    """
    settings = get_settings()
    root_level = parse_level(settings.log_level)

    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger(LEDGER_LOGGER).setLevel(parse_level(settings.ledger_log_level, root_level))

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
