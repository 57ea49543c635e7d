"""Command line front end for the GigaPlanner build codec.

Usage examples:
    gigaplanner --catalog-dir data/gigaplanner decode "https://gigaplanner.com?b=AgAAAAAU..."
    gigaplanner decode AgAAAAAUCQAK...
    gigaplanner encode character.json --base-url https://gigaplanner.com
    gigaplanner encode - --code-only < character.json
    gigaplanner mappings
    gigaplanner perks "LoreRim v3.0.4"

The catalog directory falls back to GIGAPLANNER_CATALOG_DIR. Results are
written to stdout as JSON (or a bare URL/code for ``encode``).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from gigaplanner_codec.codec.converter import GigaPlannerConverter
from gigaplanner_codec.core.config import get_settings
from gigaplanner_codec.core.exceptions import ConfigurationError, GigaPlannerError
from gigaplanner_codec.core.logging import bind_context, clear_context, configure_logging
from gigaplanner_codec.models.character import CharacterRecord


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gigaplanner",
        description="Encode and decode GigaPlanner build codes",
    )
    parser.add_argument("--catalog-dir", type=Path, help="Directory of catalog JSON files")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser("decode", help="Decode a share URL or build code")
    decode.add_argument("value", help="Share URL or bare build code")

    encode = commands.add_parser("encode", help="Encode a character JSON file")
    encode.add_argument("file", help="Character JSON file, or - for stdin")
    encode.add_argument("--base-url", help="Base URL for the share link")
    encode.add_argument("--code-only", action="store_true", help="Print only the build code")

    commands.add_parser("mappings", help="List id/name pairs for every catalog")

    perks = commands.add_parser("perks", help="List the perks of a perk list")
    perks.add_argument("perk_list", help="Perk list name")
    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _read_character(source: str) -> CharacterRecord:
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    return CharacterRecord.model_validate_json(text)


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name; defaults to sys.argv.

    Returns:
        Process exit status.
    """
    args = _build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    configure_logging(
        level=args.log_level or settings.effective_log_level,
        json_format=settings.json_logs,
    )

    catalog_dir = args.catalog_dir or settings.catalog_dir
    if catalog_dir is None:
        print(
            "Error: no catalog directory; pass --catalog-dir or set GIGAPLANNER_CATALOG_DIR",
            file=sys.stderr,
        )
        return 1

    bind_context(command=args.command)
    try:
        converter = GigaPlannerConverter.from_directory(catalog_dir, settings=settings)

        if args.command == "decode":
            if "?" in args.value:
                result = converter.decode_url(args.value)
                _print_json(result.model_dump(mode="json", by_alias=True))
                return 0 if result.success else 1
            character = converter.decode_build_code(args.value)
            _print_json(character.model_dump(mode="json", by_alias=True))
        elif args.command == "encode":
            character = _read_character(args.file)
            if args.code_only:
                print(converter.encode_build_code(character))
            else:
                print(converter.encode_url(character, args.base_url))
        elif args.command == "mappings":
            _print_json(converter.get_data_mappings().model_dump(mode="json", by_alias=True))
        elif args.command == "perks":
            _print_json(
                [
                    perk.model_dump(mode="json", by_alias=True)
                    for perk in converter.get_perks_for_list(args.perk_list)
                ]
            )
    except (GigaPlannerError, ValidationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        clear_context()
    return 0


if __name__ == "__main__":
    sys.exit(main())
