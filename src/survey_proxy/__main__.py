"""Run the proxy: ``python -m survey_proxy``."""

from __future__ import annotations

import logging

import uvicorn

from .config import get_settings
from .contrib.fastapi import create_app
from .logging_setup import configure_logging

logger = logging.getLogger("survey_proxy")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"App is listening on port {settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
