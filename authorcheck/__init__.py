"""Pull request check that surfaces an author checklist when new React components are added."""

from .checklist import CHECKLIST_ITEMS, render_checklist
from .config import ConfigurationError, GitHubSettings, load_pull_request_context, load_settings
from .detector import ComponentDetector
from .filters import filter_candidate_files
from .models import ChangedFile, ChangeStatus, DetectionResult, FileOutcome, OutcomeStatus

__all__ = [
    "CHECKLIST_ITEMS",
    "ChangeStatus",
    "ChangedFile",
    "ComponentDetector",
    "ConfigurationError",
    "DetectionResult",
    "FileOutcome",
    "GitHubSettings",
    "OutcomeStatus",
    "filter_candidate_files",
    "load_pull_request_context",
    "load_settings",
    "render_checklist",
]
