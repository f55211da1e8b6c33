"""Logging utilities for authorcheck commands."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

_LOGGER_NAME = "authorcheck"

# GitHub Actions workflow commands that surface a log line as an annotation.
_WORKFLOW_COMMANDS = {
    logging.DEBUG: "::debug::",
    logging.WARNING: "::warning::",
    logging.ERROR: "::error::",
    logging.CRITICAL: "::error::",
}


class WorkflowCommandFormatter(logging.Formatter):
    """Prefixes records with the matching Actions workflow command."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = _WORKFLOW_COMMANDS.get(record.levelno)
        if prefix is None:
            return message
        # Workflow commands are single-line; escape the way the Actions toolkit does.
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"{prefix}{escaped}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the authorcheck hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def running_in_actions(env: Mapping[str, str] | None = None) -> bool:
    environ = os.environ if env is None else env
    return environ.get("GITHUB_ACTIONS", "").lower() == "true"


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    annotate: bool | None = None,
) -> logging.Logger:
    """Configure the authorcheck logger with console output and optional file sink.

    When ``annotate`` is true (the default inside GitHub Actions) console
    records are emitted as workflow commands so warnings and errors show up
    as annotations on the run.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if annotate is None:
        annotate = running_in_actions()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    if annotate:
        stream_handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    else:
        stream_handler.setFormatter(logging.Formatter("[authorcheck] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["WorkflowCommandFormatter", "configure_logging", "get_logger", "running_in_actions"]
