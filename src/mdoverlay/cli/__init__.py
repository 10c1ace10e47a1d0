"""Command-line interface for the mdoverlay decoration engine.

This module provides a small CLI that parses a markdown file, computes its
decorations and prints them, either as JSON lines for an editor
integration or as a table for inspection.

Configuration is read from ``--config``, from the file named by the
``MDOVERLAY_CONFIG`` environment variable, or from a discovered
``.mdoverlay.toml``/``.yaml``/``.json`` or ``pyproject.toml``
``[tool.mdoverlay]`` table, in that order.

Examples
--------
Print decorations as JSON lines::

    $ mdoverlay README.md

Inspect them as a table, with a narrower view::

    $ mdoverlay render README.md --format table --rich --width 60

Ignore any configuration file and disable table drawing::

    $ mdoverlay README.md --no-config --table-style off

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from mdoverlay import __version__
from mdoverlay.api import render_file
from mdoverlay.cli.config import build_render_options, load_config_with_priority
from mdoverlay.cli.output import print_plain_table, print_rich_table
from mdoverlay.constants import CONFIG_ENV_VAR, DEFAULT_VIEW_WIDTH, TABLE_STYLES
from mdoverlay.exceptions import MdOverlayError, ParsingError, RenderingError, ValidationError
from mdoverlay.logging_utils import configure_logging
from mdoverlay.options.render import RenderOptions
from mdoverlay.renderers.base import JsonLinesSink

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

RENDER_COMMAND = "render"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, (OSError, UnicodeDecodeError)):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdoverlay`` command."""
    parser = argparse.ArgumentParser(
        prog="mdoverlay",
        description="Compute overlay decorations for a markdown document.",
    )
    parser.add_argument("input", help="Markdown file to decorate")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or discovery)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore all configuration files")
    config_group.add_argument(
        "--table-style",
        choices=TABLE_STYLES,
        help="Override the configured table style",
    )
    config_group.add_argument(
        "--width",
        type=_positive_int,
        default=DEFAULT_VIEW_WIDTH,
        help=f"Display width of the view (default: {DEFAULT_VIEW_WIDTH})",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Print decorations as JSON lines or as a table (default: json)",
    )
    output_group.add_argument("--rich", action="store_true", help="Use rich formatting for table output")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    logging_group.add_argument("--verbose", action="store_true", help="Enable debug logging")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_options(parsed_args: argparse.Namespace) -> RenderOptions:
    if parsed_args.no_config:
        config: dict[str, Any] = {}
    else:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))

    overrides: dict[str, Any] = {}
    if parsed_args.table_style:
        overrides["table_style"] = parsed_args.table_style
    return build_render_options(config, overrides)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return its exit code."""
    argv = list(sys.argv[1:] if args is None else args)
    if argv and argv[0] == RENDER_COMMAND:
        argv = argv[1:]

    parser = create_parser()
    parsed_args = parser.parse_args(argv)
    _setup_logging_level(parsed_args)

    try:
        options = _load_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except MdOverlayError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    input_path = Path(parsed_args.input)
    if not input_path.is_file():
        print(f"Error: Input file does not exist: {input_path}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        if parsed_args.format == "json":
            render_file(input_path, options, width=parsed_args.width, sink=JsonLinesSink(sys.stdout))
        else:
            decorations = render_file(input_path, options, width=parsed_args.width)
            if parsed_args.rich:
                print_rich_table(decorations, title=str(input_path))
            else:
                print_plain_table(decorations)
    except (MdOverlayError, OSError, UnicodeDecodeError) as e:
        logger.debug("Rendering %s failed", input_path, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


__all__ = ["main", "create_parser", "get_exit_code_for_exception"]


if __name__ == "__main__":
    sys.exit(main())
