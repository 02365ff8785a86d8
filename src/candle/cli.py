"""Command-line interface for candle."""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

# Verify core dependencies
try:
    import bs4  # noqa: F401
    import html5lib  # noqa: F401
    import pydantic  # noqa: F401
    import rich  # noqa: F401
    import soupsieve  # noqa: F401
    import webencodings  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nCandle requires all core dependencies to be installed.", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pipx users: pipx reinstall candle --force", file=sys.stderr)
    print("  2. For pip users: pip install --upgrade --force-reinstall candle", file=sys.stderr)
    print("  3. For development: pip install -e .[dev]", file=sys.stderr)
    print("\nTo diagnose issues, run: candle --doctor", file=sys.stderr)
    sys.exit(1)

from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.extractor import Extractor
from .exceptions import CandleError, ConfigError, InputError
from .logging_config import setup_logging
from .models.config import CandleConfig
from .parsing.directives import parse_directives


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="candle",
        description="Shine a little light on your HTML using the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Operations:
  SELECTOR {text}        text content of each match
  SELECTOR {html}        pretty-printed markup of each match
  SELECTOR attr{NAME}    value of attribute NAME on each match

Examples:
  # Text of every link
  curl -s https://example.com | candle 'a {text}'

  # Several directives; values for one element are printed together
  curl -s https://example.com | candle 'a attr{href}, a {text}'

  # Pretty-print the whole document
  curl -s https://example.com | candle
        """,
    )

    parser.add_argument(
        "selector",
        nargs="?",
        default="",
        help="Directive string, e.g. 'h1 attr{class}, h1 {text}' (default: whole document as HTML)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Parsing
    parsing_group = parser.add_argument_group("parsing")
    parsing_group.add_argument(
        "--parser",
        choices=["html5lib", "html.parser"],
        default=None,
        help="HTML tree builder (default: html5lib)",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Spaces per nesting level for {html} output (default: 2)",
    )
    output_group.add_argument(
        "--no-trim",
        action="store_true",
        help="Don't strip whitespace around each result",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only report errors",
    )

    return parser


def load_config(args: argparse.Namespace) -> CandleConfig:
    """
    Build the configuration from an optional YAML file plus CLI overrides.

    Raises:
        ConfigError: If the file can't be read or the result doesn't validate
    """
    try:
        base = CandleConfig.from_yaml_file(args.config) if args.config else CandleConfig()

        overrides: dict = {}
        if args.parser:
            overrides["parser"] = args.parser
        if args.indent is not None:
            overrides["indent_width"] = args.indent
        if args.no_trim:
            overrides["trim_results"] = False
        if args.verbose:
            overrides["log_level"] = "DEBUG"
        elif args.quiet:
            overrides["log_level"] = "ERROR"

        if not overrides:
            return base
        return CandleConfig.model_validate({**base.model_dump(), **overrides})
    except Exception as e:
        raise ConfigError(f"Configuration error: {e}") from e


def read_stdin() -> bytes:
    """
    Read the whole document from standard input.

    Raises:
        InputError: If stdin is missing or is an interactive terminal
    """
    if sys.stdin is None or sys.stdin.isatty():
        raise InputError("You must pipe in input to candle")
    return sys.stdin.buffer.read()


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter doesn't fail flushing it at exit."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def run_extractor(args: argparse.Namespace) -> int:
    """Run the extractor with given arguments."""
    console = Console(stderr=True)

    try:
        config = load_config(args)
        setup_logging(
            level=config.log_level,
            log_file=str(config.log_file) if config.log_file else None,
            force=True,
        )
        # Directive errors take precedence over a missing document
        finders = parse_directives(args.selector)
        lines = Extractor(config).lines_for(read_stdin(), finders)
    except CandleError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    # Results are always UTF-8, whatever the locale says
    out = sys.stdout.buffer
    try:
        for line in lines:
            out.write(f"{line}\n".encode("utf-8"))
        out.flush()
    except BrokenPipeError:
        # The reader went away (e.g. `| head`); that's not our problem
        _silence_stdout()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        from .doctor import run_doctor

        return run_doctor()

    return run_extractor(args)


if __name__ == "__main__":
    sys.exit(main())
