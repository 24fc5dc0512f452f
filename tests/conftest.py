from __future__ import annotations

import json

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Stands in for requests.Session, answering from a {url: FakeResponse} map."""

    def __init__(self, responses=None, default=None):
        self.responses = responses or {}
        self.default = default or FakeResponse(404, {})
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        response = self.responses.get(url, self.default)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture()
def store_path(tmp_path):
    return tmp_path / "wordle-words.json"


@pytest.fixture()
def write_store(store_path):
    def _write(words):
        store_path.write_text(json.dumps({"words": words}, indent=2), encoding="utf-8")
        return store_path
    return _write
