"""Module: logging_config."""

import logging
import sys

from vaxtrack.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the API process and maintenance scripts."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # SQL echo is only wanted when explicitly debugging the engine.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
