import sys
import os
import logging

# Add backend to path
sys.path.append(os.path.join(os.getcwd(), 'backend'))

from feed_parser import parse_service_status
from fetcher import fetch_status_feed
from presenter import print_lines_by_status
from status_mapper import get_data_by_subway_line, get_latest_update_time
from config import known_lines

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def main():
    logger.info("Fetching live status feed...")
    body = fetch_status_feed()
    service = parse_service_status(body)

    logger.info(f"Response code: {service.response_code!r}, updated {get_latest_update_time(service)}")
    for line in service.lines:
        logger.info(f"Feed entry {line.name!r}: {line.status} ({line.date} {line.time})")

    subway_map = get_data_by_subway_line(service)
    print_lines_by_status(subway_map, logger)

    missing = [line_id for line_id in known_lines() if line_id not in subway_map]
    if not missing:
        logger.info("Every known line has a status.")
    else:
        logger.warning(f"No status for {len(missing)} known lines: {', '.join(missing)}")


if __name__ == "__main__":
    main()
