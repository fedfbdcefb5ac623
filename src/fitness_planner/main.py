"""Application entry point."""

import logging

import uvicorn
from dotenv import load_dotenv

# Load .env for local dev before settings are read
load_dotenv(override=False)

from fitness_planner.config import SETTINGS  # noqa: E402
from fitness_planner.logging_setup import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    logger.info("Starting %s on %s:%d", SETTINGS.APP_NAME, SETTINGS.HOST, SETTINGS.PORT)
    uvicorn.run(
        "fitness_planner.server.main:app",
        host=SETTINGS.HOST,
        port=SETTINGS.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
