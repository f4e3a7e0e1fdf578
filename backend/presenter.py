import logging

from config import ERROR_PREFIX
from models import Response

logger = logging.getLogger(__name__)


def _emit(reporter, message):
    if callable(getattr(reporter, "debug", None)):
        reporter.debug(message)
    else:
        reporter(message)


def print_lines_by_status(subway_map, reporter=None):
    """Report each line and its status. Debugging aid only.

    `reporter` is a logger-like object or a callable taking one string.
    """
    reporter = reporter or logger
    for line_id, status in subway_map.items():
        _emit(reporter, f"line: {line_id} : {status}")


def get_error_msg(err):
    return Response(message=ERROR_PREFIX + str(err)), err
