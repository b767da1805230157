"""Process-wide logging setup, called once by the CLI entry point."""

from __future__ import annotations

import logging

from autorepair.infrastructure.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)
