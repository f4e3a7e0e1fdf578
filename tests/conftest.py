"""Shared fixtures: a sample status document and a fake requests session."""

from unittest.mock import MagicMock, PropertyMock

import pytest
import requests

SAMPLE_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<service>
  <responsecode>0</responsecode>
  <timestamp>10/19/2026 8:15:00 AM</timestamp>
  <subway>
    <line>
      <name>123</name>
      <status>GOOD SERVICE</status>
      <text />
      <Date></Date>
      <Time></Time>
    </line>
    <line>
      <name>ACE</name>
      <status>DELAYS</status>
      <text>&lt;p&gt;Signal problems&lt;/p&gt;</text>
      <Date>10/19/2026</Date>
      <Time> 8:02AM</Time>
    </line>
    <line>
      <name>SIR</name>
      <status>PLANNED WORK</status>
      <text />
      <Date>10/19/2026</Date>
      <Time>7:30AM</Time>
    </line>
  </subway>
  <bus>
    <line>
      <name>B1 - B84</name>
      <status>GOOD SERVICE</status>
    </line>
  </bus>
</service>
"""

EMPTY_FEED = b"<service><responsecode>0</responsecode><timestamp>x</timestamp><subway /></service>"


@pytest.fixture
def sample_feed():
    return SAMPLE_FEED


@pytest.fixture
def empty_feed():
    return EMPTY_FEED


def make_session(content=b"", error=None, status_code=200, read_error=None):
    """Build a requests.Session stand-in returning `content` or raising `error`.

    `read_error` is raised when the response body is read.
    """
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
        return session

    response = MagicMock(spec=requests.Response)
    if read_error is not None:
        type(response).content = PropertyMock(side_effect=read_error)
    else:
        response.content = content
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
    session.get.return_value = response
    return session


@pytest.fixture
def session_factory():
    return make_session
