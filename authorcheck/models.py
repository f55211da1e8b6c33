"""Core data models shared across authorcheck components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union


class ChangeStatus(str, Enum):
    """Change status values reported by the GitHub pull request files API."""

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"

    @classmethod
    def parse(cls, value: str) -> Union["ChangeStatus", str]:
        """Return the matching member, or the raw string for statuses GitHub may add later."""
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class ChangedFile:
    """A file touched by a pull request."""

    filename: str
    status: Union[ChangeStatus, str]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ChangedFile":
        filename = payload.get("filename")
        status = payload.get("status")
        if not isinstance(filename, str) or not isinstance(status, str):
            raise ValueError(f"Changed file entry requires string filename and status: {payload!r}")
        return cls(filename=filename, status=ChangeStatus.parse(status))

    @property
    def is_added(self) -> bool:
        return self.status == ChangeStatus.ADDED


class OutcomeStatus(str, Enum):
    MATCHED = "matched"
    NO_MATCH = "no_match"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileOutcome:
    """Result of inspecting one candidate file."""

    filename: str
    status: OutcomeStatus
    reason: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.status is OutcomeStatus.MATCHED


@dataclass(frozen=True)
class DetectionResult:
    """Aggregate verdict for one detection run."""

    matched: bool
    matched_file: Optional[str] = None
    inspected: Tuple[FileOutcome, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, bool]:
        return {"matched": self.matched}


@dataclass(frozen=True)
class PullRequestContext:
    """Pull request coordinates taken from the triggering workflow event."""

    number: Optional[int]
    head_ref: str
    base_ref: Optional[str] = None
