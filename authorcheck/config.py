"""Configuration loading for authorcheck (.authorcheck.yml, environment, workflow event)."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .models import PullRequestContext

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_REQUEST_TIMEOUT = 30.0
CONFIG_FILENAME = ".authorcheck.yml"


class ConfigurationError(RuntimeError):
    """Raised when the invocation lacks the context required to run a check."""


@dataclass(frozen=True)
class GitHubSettings:
    """Repository coordinates and API access settings for the content fetcher."""

    owner: str
    repo: str
    token: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def coordinates(self) -> Tuple[str, str]:
        return self.owner, self.repo


def load_settings(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> GitHubSettings:
    """Assemble GitHub settings from an optional config file and environment overrides.

    Precedence, lowest to highest: built-in defaults, ``.authorcheck.yml``,
    ``GITHUB_REPOSITORY`` (coordinates only), ``AUTHORCHECK_*`` variables.
    """
    environ = os.environ if env is None else env

    file_data: Dict[str, Any] = {}
    if config_path is not None:
        config_file = _resolve_config_path(config_path)
        if config_file.exists():
            data = _read_config(config_file)
            if not isinstance(data, dict):
                raise ConfigurationError(f"{CONFIG_FILENAME} must contain a mapping at the root")
            file_data = _as_dict(data.get("github"))

    owner = _as_str(file_data.get("owner"))
    repo = _as_str(file_data.get("repo"))
    api_url = _as_str(file_data.get("api_url")) or DEFAULT_API_URL
    timeout = _as_float(file_data.get("request_timeout"))

    repository = environ.get("GITHUB_REPOSITORY")
    if repository and "/" in repository:
        env_owner, env_repo = repository.split("/", 1)
        owner = env_owner or owner
        repo = env_repo or repo

    owner = environ.get("AUTHORCHECK_OWNER") or owner
    repo = environ.get("AUTHORCHECK_REPO") or repo
    api_url = environ.get("AUTHORCHECK_API_URL") or api_url
    token = environ.get("AUTHORCHECK_TOKEN") or environ.get("GITHUB_TOKEN") or None

    if not owner or not repo:
        raise ConfigurationError(
            "Repository coordinates are missing. Set github.owner/github.repo in "
            f"{CONFIG_FILENAME}, AUTHORCHECK_OWNER/AUTHORCHECK_REPO, or GITHUB_REPOSITORY."
        )

    return GitHubSettings(
        owner=owner,
        repo=repo,
        token=token,
        api_url=api_url.rstrip("/"),
        request_timeout=timeout if timeout and timeout > 0 else DEFAULT_REQUEST_TIMEOUT,
    )


def load_pull_request_context(event_path: Path | str | None) -> PullRequestContext:
    """Read the pull request head/base refs from a GitHub Actions event payload."""
    if not event_path:
        raise ConfigurationError(
            "No workflow event payload available. Pass --event or set GITHUB_EVENT_PATH."
        )
    path = Path(event_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Workflow event payload not found at {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Workflow event payload at {path} is not valid JSON: {exc}") from exc

    pull_request = _as_dict(_as_dict(payload).get("pull_request"))
    if not pull_request:
        raise ConfigurationError("Workflow event payload does not describe a pull request")

    head_ref = _as_str(_as_dict(pull_request.get("head")).get("ref"))
    if not head_ref:
        raise ConfigurationError("Pull request payload is missing head.ref")

    number = pull_request.get("number")
    return PullRequestContext(
        number=number if isinstance(number, int) else None,
        head_ref=head_ref,
        base_ref=_as_str(_as_dict(pull_request.get("base")).get("ref")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
