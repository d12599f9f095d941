"""Command-line interface printing field and tokenizer config documents.

Examples:
    search-config tokenizer ngram --min-gram 3 --max-gram 3
    search-config field body --indexed --no-stored --tokenizer '{"type": "en_stem"}'
"""

# ruff: noqa: T201  # CLI writes documents to stdout

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from typing import Any

from pydantic import ValidationError

from search_config.config import get_settings
from search_config.declarations import declare_field, declare_tokenizer
from search_config.documents import ConfigDocument, dumps, loads
from search_config.errors import ConfigDeclarationError
from search_config.observability import configure_logging


logger = logging.getLogger(__name__)

_TOKENIZER_OPTIONS = ("min_gram", "max_gram", "prefix_only", "language", "pattern")
_FIELD_OPTIONS = ("indexed", "stored", "fast", "fieldnorms", "record", "expand_dots", "normalizer")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-config",
        description="Build full-text search field and tokenizer config documents",
    )
    parser.add_argument(
        "--indent",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Pretty-print the JSON document (default from SEARCH_CONFIG_JSON_INDENT)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tokenizer_parser = subparsers.add_parser("tokenizer", help="Build a tokenizer document")
    tokenizer_parser.add_argument("name", help="Tokenizer kind, e.g. default, ngram, regex")
    tokenizer_parser.add_argument("--min-gram", dest="min_gram", type=int, default=None)
    tokenizer_parser.add_argument("--max-gram", dest="max_gram", type=int, default=None)
    tokenizer_parser.add_argument(
        "--prefix-only", dest="prefix_only", action=argparse.BooleanOptionalAction, default=None
    )
    tokenizer_parser.add_argument("--language", default=None)
    tokenizer_parser.add_argument("--pattern", default=None)

    field_parser = subparsers.add_parser("field", help="Build a field document")
    field_parser.add_argument("name", help="Field name")
    for flag in ("indexed", "stored", "fast", "fieldnorms"):
        field_parser.add_argument(f"--{flag}", action=argparse.BooleanOptionalAction, default=None)
    field_parser.add_argument("--record", default=None, help="basic, freq or position")
    field_parser.add_argument(
        "--expand-dots", dest="expand_dots", action=argparse.BooleanOptionalAction, default=None
    )
    field_parser.add_argument("--tokenizer", default=None, help="Tokenizer document or declaration as JSON")
    field_parser.add_argument("--normalizer", default=None, help="raw or lowercase")

    return parser


def _collect(args: argparse.Namespace, options: Sequence[str]) -> dict[str, Any]:
    declaration: dict[str, Any] = {"name": args.name}
    for option in options:
        value = getattr(args, option)
        if value is not None:
            declaration[option] = value
    return declaration


def build_document(args: argparse.Namespace) -> ConfigDocument:
    """Turn parsed arguments into a config document.

    Raises:
        ConfigDeclarationError: If the declaration is rejected.
    """
    if args.command == "tokenizer":
        return declare_tokenizer(_collect(args, _TOKENIZER_OPTIONS))

    declaration = _collect(args, _FIELD_OPTIONS)
    if args.tokenizer is not None:
        declaration["tokenizer"] = loads(args.tokenizer)
    return declare_field(declaration)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Error: Invalid settings: {exc}")
        return 1
    configure_logging(settings.log_level, settings.log_json)

    try:
        document = build_document(args)
    except ConfigDeclarationError as exc:
        print(f"Error: {exc}")
        return 1

    indent = settings.json_indent if args.indent is None else args.indent
    print(dumps(document, indent=indent))
    logger.debug("Wrote %s document", args.command)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
