"""Test doubles shared across the test modules"""
import threading

import requests
from unittest.mock import MagicMock

from schedule_viewer.ui.renderer import display_state, loading_state


BASE_URL = "http://schedules.test/json"


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, body_error=None):
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


class RecordingTarget:
    """Render target that keeps every display transition."""

    def __init__(self):
        self.events = []
        self.state = None
        self.lock = threading.Lock()

    def show_loading(self):
        with self.lock:
            self.events.append(("loading", None))
            self.state = loading_state()

    def render(self, result):
        with self.lock:
            self.events.append(("render", result))
            self.state = display_state(result)

    @property
    def renders(self):
        return [result for kind, result in self.events if kind == "render"]


def make_session(routes):
    """Session double answering GETs from a {resource name: FakeResponse} mapping."""
    session = MagicMock(spec=requests.Session)

    def get(url, timeout=None):
        name = url.rsplit("/", 1)[-1]
        response = routes.get(name, FakeResponse(404))
        if callable(response):
            return response()
        return response

    session.get.side_effect = get
    return session
