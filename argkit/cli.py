# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Thin process-facing shim around `ArgParser`.

The parser itself never prints errors or exits. `run()` sources the argument
vector from the process, reports failures on stderr and turns every outcome
into an exit code:

- success → returns the `ArgMap`
- help requested → exit 0
- parse failure → exit 1

Programs that want different behavior can call `ArgParser.parse()` directly
and handle `HelpSignal` / `ArgumentParseError` themselves.
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from argkit.console import error_console
from argkit.exceptions import ArgKitError, ArgumentParseError
from argkit.logger import logger
from argkit.parser.arg_map import ArgMap
from argkit.parser.arg_parser import ArgParser
from argkit.signals import HelpSignal
from argkit.themes import OneColors

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_DEFINITION_ERROR = 2


def report_error(error: ArgKitError, console: Console | None = None) -> None:
    """Print an error, followed by the usage line when it carries one."""
    console = console or error_console
    if isinstance(error, ArgumentParseError):
        console.print(
            f"[{OneColors.DARK_RED}]{escape(error.reason)}:[/]", highlight=False, soft_wrap=True
        )
        if error.usage:
            console.print(escape(error.usage), highlight=False, soft_wrap=True)
    else:
        console.print(f"[{OneColors.DARK_RED}]{escape(str(error))}[/]", highlight=False)


def run(
    parser: ArgParser,
    argv: Sequence[str] | None = None,
    console: Console | None = None,
) -> ArgMap:
    """
    Parse the process arguments or exit.

    Args:
        parser (ArgParser): A fully registered parser.
        argv (Sequence[str] | None): Full argument vector including the program
            path. Defaults to `sys.argv`.
        console (Console | None): Console for error output. Defaults to stderr.

    Returns:
        ArgMap: The parsed arguments.

    Raises:
        SystemExit: With `EXIT_OK` after help, `EXIT_PARSE_ERROR` on bad input.
    """
    if argv is None:
        argv = sys.argv
    try:
        return parser.parse_argv(argv)
    except HelpSignal:
        sys.exit(EXIT_OK)
    except ArgumentParseError as error:
        logger.debug("Parse failed: %s", error.reason)
        report_error(error, console)
        sys.exit(EXIT_PARSE_ERROR)
