"""Detection pipeline: filter, fetch, parse and classify changed files."""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional

from .config import ConfigurationError
from .filters import filter_candidate_files
from .github.content import ContentFetcher
from .logging import get_logger
from .models import ChangedFile, DetectionResult, FileOutcome, OutcomeStatus
from .parsing import ComponentClassifier, ParseError, SyntaxParser


class ComponentDetector:
    """Decides whether a pull request adds a file defining a new component.

    Candidate files are processed one at a time in the order GitHub lists
    them. The first file classified as a component ends the run; later files
    are never fetched. Files that cannot be fetched or parsed are skipped.
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        parser: SyntaxParser | None = None,
        classifier: ComponentClassifier | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.parser = parser or SyntaxParser()
        self.classifier = classifier or ComponentClassifier()
        self.logger = get_logger("detector")

    async def detect(
        self, changed_files: Iterable[ChangedFile], head_ref: Optional[str]
    ) -> DetectionResult:
        if not head_ref or not head_ref.strip():
            raise ConfigurationError("Pull request head ref is required to fetch file content")

        candidates = filter_candidate_files(changed_files)
        self.logger.debug("%d candidate files after filtering", len(candidates))

        inspected: List[FileOutcome] = []
        for changed_file in candidates:
            outcome = await self.inspect(changed_file, head_ref)
            inspected.append(outcome)
            if outcome.matched:
                return DetectionResult(
                    matched=True,
                    matched_file=outcome.filename,
                    inspected=tuple(inspected),
                )
        return DetectionResult(matched=False, inspected=tuple(inspected))

    def detect_sync(
        self, changed_files: Iterable[ChangedFile], head_ref: Optional[str]
    ) -> DetectionResult:
        return asyncio.run(self.detect(changed_files, head_ref))

    async def inspect(self, changed_file: ChangedFile, head_ref: str) -> FileOutcome:
        """Fetch, parse and classify one file."""
        filename = changed_file.filename
        source = await self.fetcher.fetch(filename, head_ref)
        if not source:
            self.logger.error("failed to get code from a filename %s", filename)
            return FileOutcome(filename, OutcomeStatus.SKIPPED, reason="no content")

        try:
            tree = self.parser.parse(source, filename)
        except ParseError as exc:
            self.logger.warning("Skipping %s: %s", filename, exc)
            return FileOutcome(filename, OutcomeStatus.SKIPPED, reason=str(exc))

        if self.classifier.classify(tree):
            return FileOutcome(filename, OutcomeStatus.MATCHED)
        return FileOutcome(filename, OutcomeStatus.NO_MATCH)


__all__ = ["ComponentDetector"]
