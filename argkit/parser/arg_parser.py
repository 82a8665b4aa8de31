# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgParser`, a small declarative command-line parser.

Callers describe every recognized option with an `Arg`, register them on an
`ArgParser` and hand it a list of tokens. The parser validates the tokens and
returns an `ArgMap` for typed lookups.

Key Features:
- Builder-style registration via chained `arg()` calls
- Long (`--name`) and short (`-n`) aliases, matched exactly
- Boolean flags and value-bearing arguments (string, integer, float)
- Required argument enforcement with the usage line in the error
- Built-in `-h` / `--help` rendered with Rich

Public Interface:
- `arg(...)`: Register one argument and return the parser.
- `parse(...)`: Parse a token list into an `ArgMap`.
- `parse_argv(...)`: Same, for a full argv whose first item is the program.
- `format_usage()` / `format_help()`: Plain text usage and help screen.
- `render_usage()` / `render_help()`: Print them through the console.

Example Usage:
    parser = (
        ArgParser("Find duplicate files.")
        .arg(Arg.boolean("verbose", "V", "Verbose execution"))
        .arg(Arg.string("path", "f", True, "Directory to examine"))
    )
    arguments = parser.parse(["-V", "--path", "/tmp"])
    arguments.get("path")         # "/tmp"
    arguments.get("verbose", bool)  # True

Design Notes:
The parser does not guess. Unknown tokens, including bare words and bundled
short flags such as `-Vr`, are errors. A value-bearing argument consumes the
next token whatever it looks like, so `--offset -5` works. The parser never
exits the process; `HelpSignal` and the `ArgumentParseError` family are left
for the caller (see `argkit.cli`).
"""
from __future__ import annotations

from difflib import get_close_matches
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from argkit.console import console as shared_console
from argkit.exceptions import (
    DuplicateNameError,
    DuplicateShortError,
    InvalidValueError,
    MissingRequiredArgumentError,
    MissingValueError,
    UnrecognizedArgumentError,
)
from argkit.logger import logger
from argkit.parser.arg import HELP_NAME, HELP_SHORT, Arg
from argkit.parser.arg_kind import ArgKind
from argkit.parser.arg_map import ArgMap
from argkit.parser.arg_value import BooleanValue, TextValue
from argkit.parser.utils import validate_kind_value
from argkit.signals import HelpSignal
from argkit.themes import OneColors
from argkit.utils import get_program_name

ARG_PADDING = 9
HELP_FLAGS = (f"--{HELP_NAME}", f"-{HELP_SHORT}")
HELP_DESCRIPTION = "Print this help message"

_KIND_NAMES = {
    ArgKind.INTEGER: "integer",
    ArgKind.FLOAT: "floating point number",
}


class ArgParser:
    """
    Declarative argument parser.

    Arguments are kept in registration order, which is also the order of the
    options table in the help screen. The `-h` / `--help` pair is reserved and
    always listed last.

    Attributes:
        description (str): One line shown above the usage line.
        program (str | None): Program name used in usage text. Set from
            argument[0] by `parse_argv()` when not given explicitly.
        console (Console): Rich console used for rendering.
    """

    def __init__(
        self,
        description: str = "",
        program: str | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the ArgParser."""
        self.console: Console = console or shared_console
        self.description: str = description
        self.program: str | None = program
        self._arguments: list[Arg] = []
        self._name_map: dict[str, Arg] = {}
        self._short_map: dict[str, Arg] = {}

    @property
    def program_name(self) -> str:
        """Program name shown in usage, falling back to the running program."""
        return self.program or get_program_name()

    @property
    def arguments(self) -> tuple[Arg, ...]:
        """Registered arguments in registration order."""
        return tuple(self._arguments)

    def arg(self, arg: Arg) -> ArgParser:
        """
        Register an argument.

        Args:
            arg (Arg): The argument description.

        Returns:
            ArgParser: This parser, for chaining.

        Raises:
            DuplicateNameError: If the name is taken or is `help`.
            DuplicateShortError: If the short alias is taken or is `h`.
        """
        if not isinstance(arg, Arg):
            raise TypeError(f"Expected an Arg, got {type(arg).__name__}")

        if arg.name == HELP_NAME:
            raise DuplicateNameError(
                arg.name, f"Argument '--{HELP_NAME}' is reserved for the help screen"
            )
        if arg.name in self._name_map:
            raise DuplicateNameError(arg.name)

        if arg.short is not None:
            if arg.short == HELP_SHORT:
                raise DuplicateShortError(
                    arg.short, f"Short alias '-{HELP_SHORT}' is reserved for --{HELP_NAME}"
                )
            if arg.short in self._short_map:
                existing = self._short_map[arg.short]
                raise DuplicateShortError(
                    arg.short,
                    f"Short alias '-{arg.short}' is already used by argument "
                    f"'--{existing.name}'",
                )
            self._short_map[arg.short] = arg

        self._name_map[arg.name] = arg
        self._arguments.append(arg)
        logger.debug("Registered argument %s (%s)", arg.long_flag, arg.kind)
        return self

    def add_args(self, *args: Arg) -> ArgParser:
        """Register several arguments in order."""
        for arg in args:
            self.arg(arg)
        return self

    def get_arg(self, name: str) -> Arg | None:
        """Return the registered argument for a long name, if any."""
        return self._name_map.get(name)

    def _match(self, token: str) -> Arg | None:
        return next((arg for arg in self._arguments if arg.matches(token)), None)

    def _unrecognized(self, token: str) -> UnrecognizedArgumentError:
        hint = "Use --help to see available options."
        if token.startswith("--") and len(token) > 2:
            long_flags = [arg.long_flag for arg in self._arguments]
            candidates = [flag for flag in long_flags if flag.startswith(token)]
            if not candidates:
                candidates = get_close_matches(token, long_flags, n=3, cutoff=0.7)
            if candidates:
                hint = f"Did you mean one of: {', '.join(candidates)}?"
        elif token.startswith("-") and not token.startswith("--") and len(token) > 2:
            hint = "Combined short flags are not supported; pass each flag separately."
        logger.debug("Unrecognized token %r", token)
        return UnrecognizedArgumentError(token, self.format_usage(), hint)

    def parse(self, args: Sequence[str] | None = None) -> ArgMap:
        """
        Parse a token list into an `ArgMap`.

        Tokens are scanned left to right in a single pass. The program name is
        not part of `args`; use `parse_argv()` for a raw argv.

        Args:
            args (Sequence[str] | None): Tokens to parse.

        Returns:
            ArgMap: Values the user supplied, keyed by argument name.

        Raises:
            HelpSignal: After rendering the help screen for `-h` / `--help`.
            UnrecognizedArgumentError: For a token matching no argument.
            MissingValueError: For a value-bearing argument with no next token.
            InvalidValueError: For an integer/float value that does not parse.
            MissingRequiredArgumentError: For required arguments never supplied.
        """
        tokens = list(args or [])
        values: dict[str, BooleanValue | TextValue] = {}

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token in HELP_FLAGS:
                logger.debug("Help requested via %r", token)
                self.render_help()
                raise HelpSignal()

            matched = self._match(token)
            if matched is None:
                raise self._unrecognized(token)

            if not matched.takes_value:
                values[matched.name] = BooleanValue(True)
                i += 1
                continue

            if i + 1 >= len(tokens):
                raise MissingValueError(matched.name, token, self.format_usage())
            value = tokens[i + 1]
            try:
                validate_kind_value(value, matched.kind)
            except ValueError as error:
                raise InvalidValueError(
                    matched.name, value, _KIND_NAMES.get(matched.kind, str(matched.kind)),
                    self.format_usage(),
                ) from error
            if matched.name in values:
                logger.debug("Argument %s given again; keeping the last value", token)
            values[matched.name] = TextValue(value)
            i += 2

        missing = [
            arg.name
            for arg in self._arguments
            if arg.required and not _has_text(values.get(arg.name))
        ]
        if missing:
            logger.debug("Missing required arguments: %s", missing)
            raise MissingRequiredArgumentError(missing, self.format_usage())

        return ArgMap(values, names=tuple(self._name_map))

    def parse_argv(self, argv: Sequence[str]) -> ArgMap:
        """
        Parse a full argument vector.

        The first item is the program path; its basename becomes the program
        name unless one was given to the constructor.
        """
        if argv and self.program is None:
            self.program = get_program_name(argv[0])
        return self.parse(list(argv[1:]))

    def format_usage(self) -> str:
        """Return the usage line, listing required arguments only."""
        parts = ["Usage:", self.program_name, "[options]"]
        parts.extend(arg.get_usage_text() for arg in self._arguments if arg.required)
        return " ".join(parts)

    def _column_width(self) -> int:
        width = len(HELP_NAME) + ARG_PADDING
        for arg in self._arguments:
            if arg.takes_value:
                width = max(width, len(arg.name) * 2 + ARG_PADDING)
            else:
                width = max(width, len(arg.name) + ARG_PADDING)
        return width

    def _option_rows(self) -> list[tuple[str, str, str]]:
        width = self._column_width()
        rows = []
        for arg in self._arguments:
            short = f"{arg.short_flag}," if arg.short_flag else "   "
            rows.append((short, f"--{arg.get_sample_text():<{width}}", arg.help))
        rows.append((f"-{HELP_SHORT},", f"--{HELP_NAME:<{width}}", HELP_DESCRIPTION))
        return rows

    def format_help(self) -> str:
        """Return the full help screen as plain text."""
        lines = []
        if self.description:
            lines.append(self.description)
        lines.append(self.format_usage())
        lines.append("")
        lines.append("options:")
        lines.append("-------")
        for short, long, help_text in self._option_rows():
            lines.append(f"{short} {long} {help_text}".rstrip())
        return "\n".join(lines)

    def render_usage(self, console: Console | None = None) -> None:
        """Print the usage line."""
        (console or self.console).print(
            escape(self.format_usage()), style="bold", highlight=False, soft_wrap=True
        )

    def render_help(self) -> None:
        """
        Print the help screen using Rich output.

        Includes the description, the usage line and the options table.
        """
        if self.description:
            self.console.print(
                escape(self.description),
                style=OneColors.WHITE,
                highlight=False,
                soft_wrap=True,
            )
        self.render_usage()
        self.console.print()
        self.console.print("options:", style="bold", highlight=False)
        self.console.print("-------", highlight=False)
        for short, long, help_text in self._option_rows():
            line = f"[{OneColors.CYAN}]{escape(short)} {escape(long)}[/] {escape(help_text)}"
            self.console.print(line.rstrip(), highlight=False, soft_wrap=True)

    def __len__(self) -> int:
        return len(self._arguments)

    def __contains__(self, name: object) -> bool:
        return name in self._name_map

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        required = sum(arg.required for arg in self._arguments)
        shorts = len(self._short_map)
        return f"ArgParser(args={len(self._arguments)}, shorts={shorts}, required={required})"

    def __repr__(self) -> str:
        return str(self)


def _has_text(value: BooleanValue | TextValue | None) -> bool:
    return isinstance(value, TextValue) and value.value != ""
