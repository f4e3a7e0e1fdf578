import random
from datetime import datetime
from xml.sax.saxutils import escape

from config import SUBWAY_LINES

STATUSES = ["GOOD SERVICE", "DELAYS", "PLANNED WORK", "SERVICE CHANGE", "SUSPENDED"]


def _line_xml(name, status, now):
    return (
        "<line>"
        f"<name>{escape(name)}</name>"
        f"<status>{escape(status)}</status>"
        "<text />"
        f"<Date>{now.strftime('%m/%d/%Y')}</Date>"
        f"<Time>{now.strftime('%I:%M%p').lstrip('0')}</Time>"
        "</line>"
    )


def generate_mock_feed(seed=None):
    """Build a serviceStatus.txt style document with random statuses for every line group."""
    rng = random.Random(seed)
    now = datetime.now()

    lines = []
    for division in SUBWAY_LINES.values():
        for group in division["groups"]:
            # Mostly good service, like the real feed
            status = "GOOD SERVICE" if rng.random() < 0.6 else rng.choice(STATUSES[1:])
            lines.append(_line_xml(group, status, now))

    doc = (
        "<service>"
        "<responsecode>0</responsecode>"
        f"<timestamp>{now.strftime('%m/%d/%Y %I:%M:%S %p')}</timestamp>"
        f"<subway>{''.join(lines)}</subway>"
        "</service>"
    )
    return doc.encode("utf-8")


def fetch_mock_feed(session=None):
    return generate_mock_feed()
