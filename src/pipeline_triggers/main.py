"""CLI entrypoint: match a trigger event against a set of pipelines."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pipeline_triggers import __version__
from pipeline_triggers.config import TriggerSettings
from pipeline_triggers.dispatch import create_dispatcher
from pipeline_triggers.eventhandlers.base import ConversionError
from pipeline_triggers.logging import configure_logging
from pipeline_triggers.model.event import Event
from pipeline_triggers.model.pipeline import Pipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipeline-triggers",
        description="Resolve trigger events to the pipelines they should run",
    )
    parser.add_argument(
        "--version", action="version", version=f"pipeline-triggers {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    match = subparsers.add_parser(
        "match", help="Print the pipelines an event targets, with their built triggers"
    )
    match.add_argument(
        "--event",
        type=Path,
        required=True,
        help="JSON file holding the event: {\"type\": ..., \"content\": ...}",
    )
    match.add_argument(
        "--pipelines",
        type=Path,
        required=True,
        help="JSON file holding an array of pipeline definitions",
    )
    return parser


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _load_pipelines(path: Path) -> list[Pipeline]:
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON array of pipelines in {path}")
    return [Pipeline.model_validate(item) for item in raw]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = TriggerSettings()
    except ValidationError as e:
        # Logging isn't configured yet.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "match":
            try:
                event = Event.model_validate(_read_json(args.event))
            except ValidationError as e:
                raise ConversionError(f"Event file is not a valid event: {e}") from e
            pipelines = _load_pipelines(args.pipelines)

            with create_dispatcher(settings) as dispatcher:
                matched = dispatcher.matching_pipelines(event, pipelines)
            print(json.dumps([p.to_json() for p in matched], indent=2, ensure_ascii=False))
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except ConversionError as e:
        logger.warning(str(e), extra={"event_type": e.event_type})
        print(str(e), file=sys.stderr)
        return 3

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
