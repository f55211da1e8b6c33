from __future__ import annotations

import base64
from typing import Callable, Dict, List, Optional

import pytest

from authorcheck.config import GitHubSettings
from authorcheck.github.api import ApiRequest, FetchError


class FakeContentsTransport:
    """Serves contents API payloads keyed by file path and records every request."""

    def __init__(self, files: Dict[str, object] | None = None) -> None:
        self.files: Dict[str, object] = dict(files or {})
        self.requests: List[ApiRequest] = []

    def __call__(self, request: ApiRequest) -> object:
        self.requests.append(request)
        path = str(request.params.get("path"))
        if path not in self.files:
            raise FetchError("GitHub API returned status 404: Not Found")
        value = self.files[path]
        if isinstance(value, Exception):
            raise value
        if callable(value):
            return value(request)
        return value

    @property
    def fetched_paths(self) -> List[str]:
        return [str(request.params.get("path")) for request in self.requests]


def encode_content(source: str) -> Dict[str, object]:
    """Build a contents API payload the way GitHub returns it (base64, wrapped lines)."""
    encoded = base64.b64encode(source.encode("utf-8")).decode("ascii")
    wrapped = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))
    return {"type": "file", "encoding": "base64", "content": wrapped + "\n"}


@pytest.fixture
def settings() -> GitHubSettings:
    return GitHubSettings(owner="Expensify", repo="App", token="test-token")


@pytest.fixture
def contents() -> Callable[[str], Dict[str, object]]:
    return encode_content


@pytest.fixture
def transport_factory() -> Callable[[Optional[Dict[str, object]]], FakeContentsTransport]:
    return FakeContentsTransport


class _BrokenResponse:
    """Response whose body read fails, like a connection dropped mid-transfer."""

    def __init__(self, error: BaseException) -> None:
        self._error = error

    def read(self) -> bytes:
        raise self._error

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


@pytest.fixture
def failing_urlopen(monkeypatch) -> Callable[[BaseException], List[str]]:
    """Route ``urlopen`` to responses that raise ``error`` while reading the body."""

    def _install(error: BaseException) -> List[str]:
        urls: List[str] = []

        def fake_urlopen(request, timeout=None):
            urls.append(request.full_url)
            return _BrokenResponse(error)

        monkeypatch.setattr("authorcheck.github.api.urlopen", fake_urlopen)
        return urls

    return _install
