"""Fetch file content at a ref through the GitHub contents API."""

from __future__ import annotations

import asyncio
import base64
import binascii
from typing import Optional

from ..config import GitHubSettings
from ..logging import get_logger
from .api import ApiRequest, FetchError, Transport, build_request, http_transport, repo_route

logger = get_logger("github.content")


def decode_base64_content(data: str) -> str:
    """Decode a base64 ``content`` field (GitHub wraps it at 60 columns) to UTF-8 text."""
    try:
        return base64.b64decode(data).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise FetchError(f"Unable to decode file content: {exc}") from exc


class ContentFetcher:
    """Retrieves the text of one file at one ref.

    Failures never escape :meth:`fetch`; they are logged with the request
    parameters and reported as ``None`` so one unreadable file cannot fail a
    whole detection run.
    """

    def __init__(self, settings: GitHubSettings, transport: Transport | None = None) -> None:
        self.settings = settings
        self._transport = transport or http_transport

    async def fetch(self, path: str, ref: str) -> Optional[str]:
        """Return the decoded text of ``path`` at ``ref``, or ``None`` when it cannot be read."""
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, self.fetch_blocking, path, ref)
        except FetchError as exc:
            logger.error(
                "An error occurred with the GitHub API: %s, while fetching %s",
                exc,
                self._params(path, ref),
            )
            return None

    def fetch_blocking(self, path: str, ref: str) -> str:
        payload = self._transport(self._request(path, ref))
        if isinstance(payload, str):
            return payload
        if isinstance(payload, dict) and "content" in payload:
            if payload.get("encoding") == "none":
                # Files above 1 MB come back without inline content.
                logger.debug("Content of %s omitted by the API; requesting raw media", path)
                raw = self._transport(self._request(path, ref, raw=True))
                if isinstance(raw, str):
                    return raw
                raise FetchError(f"Raw content request for {path} returned {type(raw).__name__}")
            return decode_base64_content(payload.get("content") or "")
        raise FetchError(f"{path} at {ref} did not resolve to a file")

    def _request(self, path: str, ref: str, *, raw: bool = False) -> ApiRequest:
        return build_request(
            self.settings,
            repo_route(self.settings, "contents", path),
            query={"ref": ref},
            raw=raw,
            params=self._params(path, ref),
        )

    def _params(self, path: str, ref: str) -> dict[str, object]:
        return {
            "owner": self.settings.owner,
            "repo": self.settings.repo,
            "path": path,
            "ref": ref,
        }
