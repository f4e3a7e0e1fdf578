class StatusFeedError(Exception):
    """Base class for failures handling the service status feed."""


class FeedParseError(StatusFeedError):
    """The feed body was not well-formed XML."""
