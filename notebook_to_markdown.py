"""Convert exported e-reader notebook HTML files into Markdown."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from config_loader import ConfigError, resolve_conversion_options
from notebook_export import ConversionResult, process_paths


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""

    parser = argparse.ArgumentParser(
        description=(
            "Convert exported notebook HTML files into Markdown documents"
            " written next to the source files."
        )
    )
    parser.add_argument(
        "paths", nargs="*", help="Notebook HTML files to convert."
    )
    parser.add_argument(
        "--txt",
        action="store_true",
        help="Write .txt files instead of .md.",
    )
    parser.add_argument(
        "--no-rename",
        action="store_true",
        help=(
            "Keep the original file name and only replace the extension"
            " instead of sanitizing it."
        ),
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    return parser


def parse_args(
    argv: Optional[Sequence[str]] = None,
) -> tuple[argparse.Namespace, List[str]]:
    """Return parsed flags and the input paths.

    Tokens argparse does not recognize are treated as paths too.
    """

    args, extras = build_parser().parse_known_args(argv)
    return args, [*args.paths, *extras]


def run(argv: Optional[Sequence[str]] = None) -> List[ConversionResult]:
    """Convert every path named on the command line."""

    args, paths = parse_args(argv)
    try:
        options = resolve_conversion_options(
            config_path=args.config,
            extension=".txt" if args.txt else None,
            naming_strategy="preserve" if args.no_rename else None,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    return process_paths(paths, options)


def main() -> None:
    """Entry point for the ``notebook-to-markdown`` CLI."""

    run()


if __name__ == "__main__":
    main()
