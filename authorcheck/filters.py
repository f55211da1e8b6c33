"""Selection of changed files worth inspecting for new components."""

from __future__ import annotations

from typing import Iterable, List

from .models import ChangedFile

SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")


def is_candidate(changed_file: ChangedFile) -> bool:
    """Return True for newly added files with a JavaScript/TypeScript extension."""
    if not changed_file.is_added:
        return False
    return changed_file.filename.endswith(SOURCE_EXTENSIONS)


def filter_candidate_files(files: Iterable[ChangedFile]) -> List[ChangedFile]:
    return [changed_file for changed_file in files if is_candidate(changed_file)]


__all__ = ["SOURCE_EXTENSIONS", "filter_candidate_files", "is_candidate"]
