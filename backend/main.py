from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import requests

from config import USE_MOCK_DATA, known_lines
from errors import StatusFeedError
from fetcher import fetch_status_feed
from handler import handle, handle_status
from mock_data import fetch_mock_feed
from models import LineLookup, Response, StatusReport
from presenter import get_error_msg

logger = logging.getLogger(__name__)

app = FastAPI(title="MTA Service Status")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_fetch():
    return fetch_mock_feed if USE_MOCK_DATA else fetch_status_feed


def _error_response(err):
    response, _ = get_error_msg(err)
    return JSONResponse(status_code=502, content=response.model_dump())


@app.get("/api/status", response_model=Response)
def get_status():
    response, err = handle(fetch=get_fetch())
    if err is not None:
        return _error_response(err)
    return response


@app.get("/api/lines", response_model=StatusReport)
def get_lines():
    try:
        return handle_status(fetch=get_fetch())
    except (requests.RequestException, StatusFeedError) as e:
        logger.error(f"Error building line statuses: {e}")
        return _error_response(e)


@app.get("/api/lines/{line_id}", response_model=LineLookup)
def get_line(line_id: str):
    try:
        report = handle_status(fetch=get_fetch())
    except (requests.RequestException, StatusFeedError) as e:
        logger.error(f"Error building line statuses: {e}")
        return _error_response(e)

    key = line_id.upper()
    if key not in report.lines:
        hint = f" Known lines: {', '.join(known_lines())}" if key not in known_lines() else ""
        return JSONResponse(status_code=404, content={"message": f"No status for line {line_id}.{hint}"})
    return LineLookup(line=key, status=report.lines[key])
