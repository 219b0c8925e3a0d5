"""`python -m workhours`: serve the API with uvicorn on SERVER_ADDR."""

import logging

import uvicorn

from workhours.config import get_settings
from workhours.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    host, port = settings.bind_address()
    logger.info(f"Server starting on {host}:{port}")
    uvicorn.run("workhours.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
