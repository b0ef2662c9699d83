"""CLI helper that prints the folding ranges computed for a commit message."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..core.ranges import FoldRange
from ..editor.document_model import LineDocument
from ..folding.registry import FoldingProviderRegistry, register_commit_message_folding
from ..services.settings import SettingsStore
from ..utils.logging import configure_from_settings

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the foldable regions of a git commit message.")
    parser.add_argument(
        "--file",
        type=Path,
        help="Commit message file to inspect. Reads stdin when omitted and --text not provided.",
    )
    parser.add_argument("--text", help="Inline message text. Overrides --file when provided.")
    parser.add_argument(
        "--language",
        help="Language id assigned to the document. Defaults to the configured folding language.",
    )
    parser.add_argument("--json", action="store_true", help="Emit the ranges as a JSON list.")
    parser.add_argument(
        "--settings",
        type=Path,
        help="Settings file to load instead of ~/.commitfold/settings.json.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level; defaults to DEBUG when debug logging is enabled, WARNING otherwise.",
    )
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).load()
    level = getattr(logging, args.log_level) if args.log_level else None
    configure_from_settings(settings, level=level, console=False)

    payload = _load_text(args.text, args.file)
    if payload is None:
        print("No input text provided.", file=sys.stderr)
        return 1

    document = LineDocument.from_text(
        payload,
        language_id=args.language or settings.language_id,
        path=None if args.text else args.file,
    )
    registry = FoldingProviderRegistry()
    register_commit_message_folding(registry, settings=settings)
    ranges = registry.provide_folding_ranges(document)
    LOGGER.info(
        "Found %d folding ranges in %d lines of %s",
        len(ranges),
        document.line_count,
        document.path or "<text>",
    )

    if args.json:
        print(json.dumps([item.to_dict() for item in ranges], indent=2))
    else:
        for item in ranges:
            print(_format_range(item))
    return 0


def _load_text(inline: str | None, path: Path | None) -> str | None:
    if inline:
        return inline
    if path:
        return path.read_text(encoding="utf-8")
    data = sys.stdin.read()
    return data or None


def _format_range(item: FoldRange) -> str:
    return f"{item.start_line}-{item.end_line} {item.kind.value}"


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
