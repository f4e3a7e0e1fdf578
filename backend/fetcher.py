import logging

import requests

from config import STATUS_FEED_URL, FEED_TIMEOUT

logger = logging.getLogger(__name__)


def fetch_status_feed(session=None, url=STATUS_FEED_URL, timeout=FEED_TIMEOUT):
    """Download the raw service status document.

    Args:
        session: anything with a requests-style ``get``; defaults to the ``requests`` module.
        url: feed location.
        timeout: seconds, or None to wait indefinitely.

    Returns:
        bytes: the response body.

    Raises:
        requests.RequestException: on connection, HTTP status or body read failures.
    """
    http = session or requests
    logger.info(f"Fetching {url}...")
    response = http.get(url, timeout=timeout)
    response.raise_for_status()
    body = response.content
    logger.info(f"Fetched {len(body)} bytes from {url}")
    return body
