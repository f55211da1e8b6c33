"""CLI entrypoints for authorcheck commands."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Mapping

from .checklist import render_checklist
from .config import ConfigurationError, load_pull_request_context, load_settings
from .detector import ComponentDetector
from .github.api import FetchError
from .github.content import ContentFetcher
from .github.pulls import PullRequestFilesClient
from .logging import configure_logging, get_logger
from .models import ChangedFile, DetectionResult

EXIT_CONFIGURATION_ERROR = 2


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authorcheck",
        description="Detect new React components in a pull request and surface the author checklist.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser(
        "detect",
        help="Check whether the pull request adds a file defining a new component.",
    )
    _add_verbose_option(detect_parser, suppress_default=True)
    detect_parser.add_argument(
        "--event",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="Path to the workflow event payload (defaults to $GITHUB_EVENT_PATH).",
    )
    detect_parser.add_argument(
        "--files",
        help="JSON file listing changed files as [{\"filename\": ..., \"status\": ...}]. "
        "When omitted the list is fetched from the pull request.",
    )
    detect_parser.add_argument(
        "--head-ref",
        help="Branch or ref to read file content from (overrides the event payload).",
    )
    detect_parser.add_argument(
        "--config",
        default=".",
        help="Path to .authorcheck.yml or the directory containing it.",
    )

    checklist_parser = subparsers.add_parser(
        "checklist",
        help="Print the new-component author checklist as Markdown.",
    )
    _add_verbose_option(checklist_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for authorcheck commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    if args.command == "detect":
        try:
            result = _run_detect(args)
        except ConfigurationError as exc:
            parser.exit(EXIT_CONFIGURATION_ERROR, f"authorcheck configuration error: {exc}\n")
        except FetchError as exc:
            parser.exit(1, f"authorcheck detect failed: {exc}\nRun with --verbose for more details.\n")
        print(json.dumps(result.to_dict()))
        _write_github_output(result, os.environ)
    elif args.command == "checklist":
        sys.stdout.write(render_checklist())
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_detect(args: argparse.Namespace) -> DetectionResult:
    logger = get_logger("cli")
    settings = load_settings(Path(args.config))

    head_ref = args.head_ref
    number = None
    if not head_ref or not args.files:
        context = load_pull_request_context(args.event)
        head_ref = head_ref or context.head_ref
        number = context.number

    if args.files:
        changed_files = _load_changed_files(Path(args.files))
    else:
        if number is None:
            raise ConfigurationError("Pull request number missing from the event payload")
        changed_files = PullRequestFilesClient(settings).list_files(number)

    logger.info(
        "Checking %d changed files in %s/%s at %s",
        len(changed_files),
        settings.owner,
        settings.repo,
        head_ref,
    )
    detector = ComponentDetector(ContentFetcher(settings))
    return detector.detect_sync(changed_files, head_ref)


def _load_changed_files(path: Path) -> List[ChangedFile]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Unable to read changed files from {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise ConfigurationError(f"{path} must contain a JSON list of changed files")
    try:
        return [ChangedFile.from_payload(entry) for entry in payload]
    except (AttributeError, ValueError) as exc:
        raise ConfigurationError(f"Malformed changed file entry in {path}: {exc}") from exc


def _write_github_output(result: DetectionResult, env: Mapping[str, str]) -> None:
    output_path = env.get("GITHUB_OUTPUT")
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as handle:
        handle.write(f"matched={'true' if result.matched else 'false'}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
