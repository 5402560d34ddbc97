"""Command line interface for protoc-gen-slate."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable

from .codegen_examples import default_registry
from .config import UNITS, load_config, options_from_mapping
from .errors import SlateError
from .generator import generate
from .log import configure_logging, get_logger
from .output import write_documents
from .schema import build_packages, load_descriptor_set
from .sources import SourceTree

Handler = Callable[[argparse.Namespace], int]

LOGGER = get_logger("cli")


def _handle_render(args: argparse.Namespace) -> int:
    """Render Markdown documents from a descriptor set."""
    configure_logging(verbose=args.verbose or None, log_file=args.log_file)
    try:
        values: dict[str, Any] = load_config(args.config) if args.config else {}
        overrides = {
            "languages": args.languages,
            "index_path": args.index_path,
            "source_dir": args.source_dir,
            "unit": args.unit,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        options = options_from_mapping(values)

        proto_files = load_descriptor_set(args.descriptor_set)
        packages = build_packages(proto_files, args.files or None)
        documents = generate(packages, options)
        write_documents(documents, args.output)
    except SlateError as err:
        LOGGER.error("%s", err)
        return 1
    return 0


def _handle_languages(_args: argparse.Namespace) -> int:
    """Print the registered language identifiers."""
    for language in default_registry(SourceTree(".")).languages():
        print(language)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(prog="slate-docs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="render Markdown from a descriptor set")
    render.add_argument("descriptor_set", type=Path, help="FileDescriptorSet written by protoc")
    render.add_argument("files", nargs="*", help="files to document (default: all)")
    render.add_argument("-o", "--output", type=Path, default=Path("."), help="output directory")
    render.add_argument("--languages", help="semicolon-separated language tabs")
    render.add_argument("--index-path", help="path of the aggregated index document")
    render.add_argument("--source-dir", help="directory holding the schema sources")
    render.add_argument("--unit", choices=UNITS, help="render one document per package or file")
    render.add_argument("--config", type=Path, help="TOML file with default options")
    render.add_argument("--log-file", type=Path, help="also write log records to this file")
    render.add_argument("-v", "--verbose", action="store_true", help="enable debug output")
    render.set_defaults(func=_handle_render)

    languages = subparsers.add_parser("languages", help="list the built-in language tabs")
    languages.set_defaults(func=_handle_languages)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler: Handler = args.func
    return handler(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
