"""CLI entry point for running page detection over a recorded trace.

Usage::

    python -m src.pagedetection.cli trace.json [--config heuristics.yaml] [--intent-hint authentication]

The trace file holds a JSON array of action objects, or an object with an
``actions`` array. Detected pages are printed to stdout as a JSON array.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.core.config import get_settings
from src.pagedetection.actions import parse_actions
from src.pagedetection.detector import PageBoundaryDetector
from src.pagedetection.heuristics import get_heuristics, load_heuristics
from src.pagedetection.intent import IntentHint

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagedetect",
        description="Split a recorded browser trace into named pages.",
    )
    parser.add_argument(
        "trace",
        help="Path to a JSON file with the recorded actions.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file overriding the heuristics keyword lists.",
    )
    parser.add_argument(
        "--intent-hint",
        default=None,
        help="Test-level intent type; used for generic pages when use_intent_hint is enabled.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from settings).",
    )
    return parser.parse_args(argv)


def _load_trace(path: Path) -> list[dict[str, Any]]:
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("actions", [])
    if not isinstance(data, list):
        raise ValueError(f"Trace {path} must hold a JSON array of actions")
    return data


def run(argv: list[str] | None = None) -> int:
    """Run detection and print the result; returns the process exit code."""
    args = _parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, args.log_level) if args.log_level else settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_heuristics(args.config) if args.config else get_heuristics(settings)
        actions = parse_actions(_load_trace(Path(args.trace)))
    except (OSError, ValueError, ValidationError) as exc:
        # HeuristicsConfigError and JSONDecodeError are ValueErrors
        logger.error("Cannot load input: %s", exc)
        return EXIT_BAD_INPUT

    hint = IntentHint(primary=args.intent_hint) if args.intent_hint else None
    pages = PageBoundaryDetector(config).detect_pages(actions, hint)

    json.dump([page.as_payload() for page in pages], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
