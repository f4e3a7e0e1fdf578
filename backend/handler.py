import logging

import requests

from errors import StatusFeedError
from feed_parser import decode_body, parse_service_status
from fetcher import fetch_status_feed
from models import Response, StatusReport
from presenter import get_error_msg, print_lines_by_status
from status_mapper import get_data_by_subway_line, get_latest_update_time

logger = logging.getLogger(__name__)


def handle(session=None, reporter=None, fetch=fetch_status_feed):
    """Fetch the feed, derive the per-line statuses and wrap the raw body.

    Always returns a (Response, error) pair; error is None on success.
    """
    try:
        body = fetch(session)
    except requests.RequestException as e:
        logger.error(f"Error fetching status feed: {e}")
        return get_error_msg(e)

    try:
        service = parse_service_status(body)
    except StatusFeedError as e:
        logger.error(f"Error parsing status feed: {e}")
        return get_error_msg(e)

    subway_map = get_data_by_subway_line(service)
    print_lines_by_status(subway_map, reporter)
    return Response(message=decode_body(body)), None


def handle_status(session=None, fetch=fetch_status_feed):
    """Return the derived line map. Fetch and parse errors propagate."""
    service = parse_service_status(fetch(session))
    return StatusReport(
        timestamp=get_latest_update_time(service),
        lines=get_data_by_subway_line(service),
    )
