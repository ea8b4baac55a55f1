"""Main entry point for Adhan-Core application."""

import logging

import uvicorn

from adhan_core.api.app import create_app
from adhan_core.config import get_config, setup_logging


def main() -> None:
    """Run the Adhan-Core HTTP service."""
    config = get_config()
    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Adhan-Core başlatılıyor...")
    logger.info(f"Varsayılan metot: {config.default_method}, mezhep: {config.default_madhab}")

    app = create_app(config)

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
