"""Run the gdrivecheck HTTP service."""

from __future__ import annotations

import logging
import sys

from gdrivecheck.errors import ConfigurationError, GDriveCheckError

logger = logging.getLogger("gdrivecheck")


def main() -> int:
    import uvicorn

    from gdrivecheck.api import create_app
    from gdrivecheck.config import load_settings
    from gdrivecheck.logging_setup import configure_logging

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging("INFO", use_rich=False)
        logger.critical("%s %s", exc, exc.details.get("errors", []))
        return 1

    configure_logging(settings.log_level, use_rich=settings.log_rich)

    try:
        app = create_app(settings)
    except GDriveCheckError as exc:
        logger.critical("Failed to start: %s", exc)
        return 1

    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
