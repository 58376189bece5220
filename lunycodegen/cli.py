"""LunyCodeGen command-line entry point.

Usage::

    lunycodegen --input ./descriptors --dry-run
    python -m lunycodegen --input Assets/Luny --verbose

Exit status is 0 when the run completes (including the current "not yet
implemented" report) and 1 when the inputs or configuration are invalid.
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from lunycodegen.config import GeneratorConfig
from lunycodegen.discovery import InputNotFoundError
from lunycodegen.generator import generate
from lunycodegen.utils import print_banner, print_error, print_success, print_usage, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lunycodegen",
        usage="%(prog)s [--input <path>] [--validation-only] [--dry-run] [--verbose]",
        description="Generates Luny API source files from descriptors.",
    )
    parser.add_argument(
        "--input", "-i",
        dest="inputs",
        action="append",
        metavar="<path>",
        help="Directory or file to scan for descriptors (repeatable). Default: current directory",
    )
    parser.add_argument(
        "--validation-only",
        action="store_true",
        help="Parse and validate only, don't generate",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be generated without writing files",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Detailed logging",
    )
    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge parsed CLI flags over the environment-derived configuration."""
    config = GeneratorConfig.from_env()
    overrides: dict[str, object] = {}
    if args.inputs:
        overrides["inputs"] = args.inputs
    for name in ("validation_only", "dry_run", "verbose"):
        if getattr(args, name):
            overrides[name] = True
    if not overrides:
        return config
    return GeneratorConfig.model_validate({**config.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``lunycodegen`` and ``python -m lunycodegen``."""
    if argv is None:
        argv = sys.argv[1:]

    print_banner()
    parser = build_parser()

    if not argv:
        print_usage(parser)
        return

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        result = generate(config)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)
    except InputNotFoundError as exc:
        print_error(str(exc))
        sys.exit(1)

    if result.implemented:
        print_success(f"Generated {len(result.written)} file(s).")
    else:
        print_warning(result.message)


if __name__ == "__main__":
    main()
