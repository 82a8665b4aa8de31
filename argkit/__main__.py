"""
Argkit Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Usage: python -m argkit DEFINITION [ARGS...]

Builds a parser from a YAML/TOML definition file, parses ARGS with it and
prints the resolved values. Handy for checking a definition before wiring it
into a program.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argkit.cli import EXIT_DEFINITION_ERROR, EXIT_OK, report_error, run
from argkit.config import loader
from argkit.console import console, error_console
from argkit.exceptions import ArgumentDefinitionError, ConfigError
from argkit.parser import ArgMap, ArgParser
from argkit.parser.arg_value import BooleanValue, TextValue
from argkit.themes import OneColors
from argkit.utils import get_program_name, setup_logging

MAIN_USAGE = "Usage: {program} DEFINITION [ARGS...]"
MAIN_DESCRIPTION = "Parse ARGS against the arguments declared in a definition file."


def render_arguments(parser: ArgParser, arguments: ArgMap) -> None:
    """Print one row per registered argument with its resolved value."""
    table = Table(title=parser.program_name, title_justify="left")
    table.add_column("Argument", style=OneColors.CYAN)
    table.add_column("Kind")
    table.add_column("Value")
    for arg in parser.arguments:
        value = arguments.value_of(arg.name)
        if isinstance(value, BooleanValue):
            shown = str(value.value).lower()
        elif isinstance(value, TextValue):
            shown = escape(repr(value.value))
        else:
            shown = f"[{OneColors.COMMENT_GREY}]absent[/]"
        table.add_row(escape(", ".join(arg.flags)), str(arg.kind), shown)
    console.print(table)


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    setup_logging(console_log_level=os.getenv("ARGKIT_LOG_LEVEL", "WARNING"))

    program = get_program_name(argv[0]) if argv else "argkit"
    if len(argv) < 2 or argv[1] in ("-h", "--help"):
        target = console if len(argv) >= 2 else error_console
        target.print(MAIN_DESCRIPTION, highlight=False)
        target.print(escape(MAIN_USAGE.format(program=program)), highlight=False)
        return EXIT_OK if len(argv) >= 2 else EXIT_DEFINITION_ERROR

    definition = argv[1]
    try:
        parser = loader(definition)
    except (ConfigError, ArgumentDefinitionError) as error:
        report_error(error)
        return EXIT_DEFINITION_ERROR

    if parser.program is None:
        parser.program = Path(definition).stem
    arguments = run(parser, [parser.program, *argv[2:]])
    render_arguments(parser, arguments)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
