# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the swaggerdoc command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from swaggerdoc.assembly.providers import (
    DefinitionConflictError,
    ProviderLoadError,
    load_provider,
    merge_definitions,
)
from swaggerdoc.codec.document import (
    LEGACY_PROFILE,
    DecodeError,
    DocumentIOError,
    ShapeMismatchError,
    encode,
    encode_legacy,
    read_document,
    write_document,
)
from swaggerdoc.model.entities import Document
from swaggerdoc.workspace.config import CONFIG_FILE_NAME, ToolConfig, ToolConfigError, load_tool_config

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the swaggerdoc CLI."""
    parser = argparse.ArgumentParser(
        prog="swaggerdoc",
        description="swaggerdoc - read, check and re-encode Swagger 2.0 documents",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that documents decode",
        description="Decode each document and report its paths, operations and definitions.",
    )
    check_parser.add_argument("files", nargs="+", help="JSON or YAML documents to check")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        help="Re-encode a document",
        description=(
            "Decode a document, merge definitions from the configured providers, "
            "and encode it again with empty fields left out."
        ),
    )
    format_parser.add_argument("file", help="JSON or YAML document to format")
    format_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file; the suffix selects JSON or YAML (default: JSON on stdout)",
    )
    format_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    _configure_logging(args.verbose)
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=_LOG_FORMAT)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "format":
        return _cmd_format(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for name in args.files:
        path = Path(name)
        try:
            document = read_document(path)
        except (DocumentIOError, DecodeError) as exc:
            _report(path, exc)
            has_errors = True
            continue

        assert isinstance(document, Document)
        print(
            f"{path}: {len(document.paths)} path(s), {len(document.operations())} operation(s), "
            f"{len(document.definitions)} definition(s)"
        )

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    """Handle the format subcommand."""
    try:
        config = _load_config(args.config)
    except ToolConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    path = Path(args.file)
    try:
        document = read_document(path, profile=config.profile)
    except (DocumentIOError, DecodeError) as exc:
        _report(path, exc)
        return 1

    if config.definition_providers:
        if config.profile == LEGACY_PROFILE:
            print("Error: definition providers require the standard profile.", file=sys.stderr)
            return 1
        try:
            providers = [load_provider(spec) for spec in config.definition_providers]
            document = merge_definitions(document, *providers)
        except (ProviderLoadError, DefinitionConflictError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if args.output is not None:
        try:
            write_document(document, Path(args.output), indent=config.indent, sort_keys=config.sort_keys)
        except DocumentIOError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        logger.info("Formatted %s into %s", path, args.output)
        return 0

    if isinstance(document, Document):
        payload = encode(document, indent=config.indent, sort_keys=config.sort_keys)
    else:
        payload = encode_legacy(document, indent=config.indent, sort_keys=config.sort_keys)
    print(payload.decode("utf-8"))
    return 0


def _load_config(name: str | None) -> ToolConfig:
    """Load the configuration named on the command line, or the default file if present."""
    if name is not None:
        return load_tool_config(Path(name))
    default = Path.cwd() / CONFIG_FILE_NAME
    if default.exists():
        return load_tool_config(default)
    return ToolConfig()


def _report(path: Path, exc: Exception) -> None:
    """Print a decode or I/O failure, one line per shape problem."""
    if isinstance(exc, ShapeMismatchError):
        for location, message in exc.problems:
            print(f"Error: {path}: {location}: {message}", file=sys.stderr)
    else:
        print(f"Error: {path}: {exc}", file=sys.stderr)
