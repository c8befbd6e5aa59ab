"""Shared fixtures: fake HTTP responses and an isolated config directory."""

import json

import pytest


class FakeResponse:
    """Stand-in for the object urllib.request.urlopen returns."""

    def __init__(self, body, status=200):
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        self._body = body.encode() if isinstance(body, str) else body
        self.status = status

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeOpener:
    """urlopen replacement that plays back a script of outcomes.

    Each outcome is either an exception instance (raised) or a
    FakeResponse (returned). Requested URLs are recorded.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.urls = []
        self.kwargs = []

    def __call__(self, url, **kwargs):
        self.urls.append(url)
        self.kwargs.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Keep the user's real ~/.config out of every test."""
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def no_sleep():
    """Sleep replacement that records requested delays."""
    calls = []

    def sleep(seconds):
        calls.append(seconds)

    sleep.calls = calls
    return sleep
