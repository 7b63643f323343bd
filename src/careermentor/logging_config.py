from __future__ import annotations

import logging

from careermentor.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOG_CONFIGURED = False


def configure_logging(settings: Settings | None = None) -> None:
    """Install the root handler once; later calls only adjust the package log level."""
    global _LOG_CONFIGURED
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.getLogger("careermentor").setLevel(level)
    if _LOG_CONFIGURED:
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOG_CONFIGURED = True
