"""
Test doubles: a recording session standing in for requests.Session.
"""

from __future__ import annotations

import json

import requests

API_KEY = "test-api-key"
PREPROD_URL = "https://Preprod.gomaestro-api.org/v1"
LAST_UPDATED = {"block_hash": "ab" * 32, "block_slot": 41263544, "timestamp": "2023-11-08 10:12:24"}


def make_response(status: int = 200, payload=None, text: str | None = None, content_type: str = "application/json"):
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = "utf-8"
    if text is not None:
        resp._content = text.encode()
    else:
        resp._content = json.dumps(payload if payload is not None else {}).encode()
    resp.headers["Content-Type"] = content_type
    return resp


class RecordingSession:
    """Records every request and replays queued responses in order."""

    def __init__(self):
        self.calls: list[dict] = []
        self.responses: list[requests.Response] = []
        self.closed = False

    def queue(self, *responses: requests.Response) -> None:
        self.responses.extend(responses)

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.responses:
            resp = self.responses.pop(0)
        else:
            resp = make_response(payload={"data": {}, "last_updated": LAST_UPDATED})
        resp.url = url
        return resp

    def close(self):
        self.closed = True

    @property
    def last(self) -> dict:
        return self.calls[-1]
