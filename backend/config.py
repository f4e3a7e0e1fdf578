import os

STATUS_FEED_URL = os.environ.get("MTA_STATUS_URL", "http://web.mta.info/status/serviceStatus.txt")


def _read_timeout(name="MTA_FEED_TIMEOUT", default="10"):
    # Seconds. Empty or 0 means wait for the transport default
    raw = os.environ.get(name, default).strip()
    if not raw:
        return None
    try:
        seconds = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    return seconds if seconds > 0 else None


FEED_TIMEOUT = _read_timeout()

USE_MOCK_DATA = os.environ.get("USE_MOCK_DATA", "false").lower() == "true"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Staten Island Railway is reported under one name and must not be split per character
EXCEPTION_LINE = "SIR"

ERROR_PREFIX = "Got back err: "

SUBWAY_LINES = {
    "IRT": {
        "groups": ["123", "456", "7"],
    },
    "IND": {
        "groups": ["ACE", "BDFM", "G"],
    },
    "BMT": {
        "groups": ["JZ", "L", "NQR"],
    },
    "Shuttles": {
        "groups": ["S"],
    },
    "SIR": {
        "groups": [EXCEPTION_LINE],
    },
}


def known_lines():
    lines = []
    for division in SUBWAY_LINES.values():
        for group in division["groups"]:
            if group == EXCEPTION_LINE:
                lines.append(group)
            else:
                lines.extend(group)
    return lines
