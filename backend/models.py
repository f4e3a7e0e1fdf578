from dataclasses import dataclass, field

from pydantic import BaseModel


@dataclass(frozen=True)
class LineStatus:
    """One <line> entry of the feed. `name` may hold several co-routed lines, e.g. "ACE"."""
    name: str = ""
    status: str = ""
    date: str = ""
    time: str = ""


@dataclass(frozen=True)
class ServiceStatus:
    response_code: str = ""
    timestamp: str = ""
    lines: tuple = field(default_factory=tuple)


class Response(BaseModel):
    """Invocation result returned to the serverless runtime."""
    message: str


class StatusReport(BaseModel):
    timestamp: str
    lines: dict[str, str]


class LineLookup(BaseModel):
    line: str
    status: str
