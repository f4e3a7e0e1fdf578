import logging
import os
import sys

# Add backend directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config import LOG_LEVEL
from handler import handle

logger = logging.getLogger(__name__)


def lambda_handler(event, context):
    response, err = handle()
    if err is not None:
        logger.error(f"Status request failed: {err}")
    return response.model_dump()


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info("Requesting MTA service status...")
    response, err = handle()
    if err is not None:
        logger.error(f"Handler failed: {response.message}")
        return 1
    logger.info(f"Handler returned {len(response.message)} characters")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user.")
