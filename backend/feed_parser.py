import codecs
import logging
import re
import xml.etree.ElementTree as ET

from errors import FeedParseError
from models import LineStatus, ServiceStatus

logger = logging.getLogger(__name__)

_DECLARED_ENCODING = re.compile(rb"""^\s*<\?xml[^>]*?\bencoding\s*=\s*["']([A-Za-z0-9._-]+)["']""")


def declared_encoding(body):
    """Encoding named in the XML declaration, or utf-8 when there is none we know."""
    match = _DECLARED_ENCODING.match(body)
    if match:
        name = match.group(1).decode("ascii")
        try:
            return codecs.lookup(name).name
        except LookupError:
            logger.warning(f"Unknown feed encoding {name!r}, falling back to utf-8")
    return "utf-8"


def decode_body(body):
    """Text of the raw feed, decoded the way the XML parser reads it."""
    if not body:
        return ""
    return body.decode(declared_encoding(body), errors="replace")


def _text(element, tag):
    if element is None:
        return ""
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def parse_line(element):
    return LineStatus(
        name=_text(element, "name"),
        status=_text(element, "status"),
        date=_text(element, "Date"),
        time=_text(element, "Time"),
    )


def parse_service_status(body):
    """Parse a serviceStatus.txt document into a ServiceStatus.

    Missing elements are left empty. An empty body gives an empty ServiceStatus,
    anything else that isn't well-formed XML raises FeedParseError.
    """
    if not body or not body.strip():
        return ServiceStatus()

    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise FeedParseError(f"Malformed status feed: {e}") from e

    lines = tuple(parse_line(el) for el in root.findall("subway/line"))
    logger.info(f"Parsed {len(lines)} subway line entries")
    return ServiceStatus(
        response_code=_text(root, "responsecode"),
        timestamp=_text(root, "timestamp"),
        lines=lines,
    )
