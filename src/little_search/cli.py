"""Build the index from a document list and run one two-keyword search."""

# ruff: noqa: T201  # CLI intentionally prints the search result

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path

from pydantic import ValidationError

from little_search.config import Settings
from little_search.engine import SearchEngine
from little_search.observability.logging import configure_logging
from little_search.sources import DocumentNotFoundError


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 2


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__ or "Two-keyword document search")
    parser.add_argument("keywords", nargs="*", help="First and second keyword (prompted for when omitted)")
    parser.add_argument("--docs-file", type=Path, help="File listing document identifiers (default: docs.txt)")
    parser.add_argument("--noise-words", type=Path, help="File listing noise words (default: noisewords.txt)")
    parser.add_argument("--docs-root", type=Path, help="Directory document identifiers are resolved against")
    parser.add_argument("--log-level", help="Logging level (debug, info, warning, error, critical)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit structured JSON logs")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "docs_file": args.docs_file,
        "noise_words_file": args.noise_words,
        "docs_root": args.docs_root,
        "log_level": args.log_level,
        "log_json": args.json_logs,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def _prompt_keywords(given: Sequence[str]) -> tuple[str, str]:
    words = list(given)
    if len(words) < 1:
        words.append(input("First keyword: "))
    if len(words) < 2:
        words.append(input("Second keyword: "))
    return words[0], words[1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    if len(args.keywords) > 2:
        parser.error("at most two keywords may be given")

    try:
        settings = _settings_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    configure_logging(level=settings.log_level, json_output=settings.log_json)

    try:
        engine = SearchEngine.from_settings(settings)
    except DocumentNotFoundError as exc:
        logger.error("Index build failed: %s", exc)
        print(f"Error: {exc}")
        return EXIT_NOT_FOUND

    try:
        first, second = _prompt_keywords(args.keywords)
    except EOFError:
        parser.error("two keywords are required; stdin closed before both were read")
    results = engine.top5_search(first, second)
    print()
    if results:
        print(f"Output: {results}")
    else:
        print("Output: no matches")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
