"""Minimal GitHub REST transport built on urllib."""

from __future__ import annotations

import http.client
import json
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote, urlencode
from urllib.request import Request, urlopen

from ..config import GitHubSettings

API_VERSION = "2022-11-28"
JSON_MEDIA_TYPE = "application/vnd.github+json"
RAW_MEDIA_TYPE = "application/vnd.github.raw+json"
USER_AGENT = "authorcheck"


class FetchError(RuntimeError):
    """Raised when a GitHub API request fails or returns an unusable payload."""


@dataclass
class ApiRequest:
    """Represents a single GET request against the GitHub REST API."""

    url: str
    headers: Dict[str, str]
    timeout: float
    raw: bool = False
    params: Dict[str, object] = field(default_factory=dict)


Transport = Callable[[ApiRequest], object]


def build_request(
    settings: GitHubSettings,
    route: str,
    *,
    query: Optional[Mapping[str, object]] = None,
    raw: bool = False,
    params: Optional[Mapping[str, object]] = None,
) -> ApiRequest:
    """Build a request for ``route`` (relative to the API root) with auth and media headers."""
    url = f"{settings.api_url}/{route.lstrip('/')}"
    if query:
        url = f"{url}?{urlencode(query)}"
    headers = {
        "Accept": RAW_MEDIA_TYPE if raw else JSON_MEDIA_TYPE,
        "X-GitHub-Api-Version": API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if settings.token:
        headers["Authorization"] = f"Bearer {settings.token}"
    return ApiRequest(
        url=url,
        headers=headers,
        timeout=settings.request_timeout,
        raw=raw,
        params=dict(params or {}),
    )


def repo_route(settings: GitHubSettings, *parts: str) -> str:
    owner, repo = settings.coordinates
    segments = [quote(owner, safe=""), quote(repo, safe="")]
    segments.extend(quote(part, safe="/") for part in parts)
    return "repos/" + "/".join(segments)


def http_transport(request: ApiRequest) -> object:
    """Execute ``request`` and return decoded JSON, or text for raw media requests."""
    http_request = Request(request.url, headers=request.headers, method="GET")
    try:
        with urlopen(http_request, timeout=request.timeout) as response:  # type: ignore[arg-type]
            body = response.read()
    except HTTPError as exc:
        detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
        message = _error_message(detail) or exc.reason
        raise FetchError(f"GitHub API returned status {exc.code}: {message}") from exc
    except URLError as exc:
        raise FetchError(f"GitHub API request failed: {exc.reason}") from exc
    except TimeoutError as exc:
        raise FetchError(f"GitHub API request timed out after {request.timeout}s") from exc
    except (OSError, http.client.HTTPException) as exc:
        raise FetchError(f"GitHub API request failed: {exc!r}") from exc

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FetchError("GitHub API response is not valid UTF-8") from exc
    if request.raw:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise FetchError("GitHub API returned invalid JSON") from exc


def _error_message(detail: str) -> str:
    detail = detail.strip()
    if not detail:
        return ""
    try:
        payload = json.loads(detail)
    except json.JSONDecodeError:
        return detail
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return detail
