"""List the files changed by a pull request."""

from __future__ import annotations

from typing import List

from ..config import GitHubSettings
from ..logging import get_logger
from ..models import ChangedFile
from .api import FetchError, Transport, build_request, http_transport, repo_route

logger = get_logger("github.pulls")


class PullRequestFilesClient:
    """Pages through ``GET /repos/{owner}/{repo}/pulls/{number}/files``."""

    PAGE_SIZE = 100
    # The endpoint stops returning results after 3000 files.
    MAX_PAGES = 30

    def __init__(self, settings: GitHubSettings, transport: Transport | None = None) -> None:
        self.settings = settings
        self._transport = transport or http_transport

    def list_files(self, number: int) -> List[ChangedFile]:
        files: List[ChangedFile] = []
        route = repo_route(self.settings, "pulls", str(number), "files")
        for page in range(1, self.MAX_PAGES + 1):
            request = build_request(
                self.settings,
                route,
                query={"per_page": self.PAGE_SIZE, "page": page},
                params={"number": number, "page": page},
            )
            payload = self._transport(request)
            if not isinstance(payload, list):
                raise FetchError(f"Unexpected payload listing files for pull request #{number}")
            try:
                files.extend(ChangedFile.from_payload(entry) for entry in payload)
            except (AttributeError, ValueError) as exc:
                raise FetchError(f"Malformed file entry for pull request #{number}: {exc}") from exc
            if len(payload) < self.PAGE_SIZE:
                break
        logger.debug("Pull request #%s changes %d files", number, len(files))
        return files
