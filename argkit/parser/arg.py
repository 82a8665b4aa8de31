# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Arg` dataclass used by `ArgParser` to describe one recognized
command-line option.

An `Arg` is an immutable value object. It carries the long name (matched as
`--<name>`), an optional single character short alias (matched as `-<short>`),
the value kind, whether it is required and its help text.

Arguments should be created through the kind-specific constructors:

    Arg.boolean("verbose", "V", "Verbose execution")
    Arg.string("path", "p", True, "Directory to examine")
    Arg.integer("count", None, False, "Number of workers")
    Arg.float("ratio", None, False, "Similarity threshold")

Cross-argument uniqueness is not checked here; `ArgParser.arg()` does that when
the argument is registered.
"""
from __future__ import annotations

from dataclasses import dataclass

from argkit.exceptions import ArgumentDefinitionError
from argkit.parser.arg_kind import ArgKind

HELP_NAME = "help"
HELP_SHORT = "h"


@dataclass(frozen=True)
class Arg:
    """
    Represents a command-line argument.

    Attributes:
        name (str): Long name, also the key in parsed results.
        short (str | None): Optional single character alias.
        kind (ArgKind): What the argument carries.
        required (bool): True if parsing fails without this argument.
        help (str): Help text rendered verbatim in the help screen.
    """

    name: str
    short: str | None = None
    kind: ArgKind = ArgKind.STRING
    required: bool = False
    help: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ArgKind):
            try:
                object.__setattr__(self, "kind", ArgKind(self.kind))
            except ValueError as error:
                raise ArgumentDefinitionError(str(error)) from error
        self._validate_name()
        self._validate_short()
        if self.required and not self.kind.takes_value:
            raise ArgumentDefinitionError(
                f"Argument '--{self.name}' of kind {self.kind} cannot be required"
            )

    def _validate_name(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ArgumentDefinitionError("Argument name must be a non-empty string")
        if self.name.startswith("-"):
            raise ArgumentDefinitionError(
                f"Argument name '{self.name}' must not start with '-'"
            )
        if any(char.isspace() for char in self.name):
            raise ArgumentDefinitionError(
                f"Argument name '{self.name}' must not contain whitespace"
            )

    def _validate_short(self) -> None:
        if self.short is None:
            return
        if not isinstance(self.short, str) or len(self.short) != 1:
            raise ArgumentDefinitionError(
                f"Short alias for '--{self.name}' must be a single character"
            )
        if self.short == "-" or self.short.isspace():
            raise ArgumentDefinitionError(
                f"Short alias {self.short!r} for '--{self.name}' is not allowed"
            )
        if self.short == HELP_SHORT:
            raise ArgumentDefinitionError(
                f"Short alias '-{HELP_SHORT}' is reserved for --{HELP_NAME}"
            )

    @classmethod
    def boolean(cls, name: str, short: str | None = None, help: str = "") -> Arg:
        """
        Boolean argument. Always optional; resolves to True when present.

        Args:
            name (str): Full name for the argument.
            short (str | None): Single character alias.
            help (str): Description for the argument.
        """
        return cls(name=name, short=short, kind=ArgKind.BOOLEAN, help=help)

    @classmethod
    def string(
        cls, name: str, short: str | None = None, required: bool = False, help: str = ""
    ) -> Arg:
        """
        String argument consuming the following token as its value.

        Args:
            name (str): Full name for the argument.
            short (str | None): Single character alias.
            required (bool): Whether parsing fails without this argument.
            help (str): Description for the argument.
        """
        return cls(name=name, short=short, kind=ArgKind.STRING, required=required, help=help)

    @classmethod
    def integer(
        cls, name: str, short: str | None = None, required: bool = False, help: str = ""
    ) -> Arg:
        """Integer argument; its value must parse as a whole number."""
        return cls(
            name=name, short=short, kind=ArgKind.INTEGER, required=required, help=help
        )

    @classmethod
    def float(
        cls, name: str, short: str | None = None, required: bool = False, help: str = ""
    ) -> Arg:
        """Floating point argument; its value must parse as a number."""
        return cls(name=name, short=short, kind=ArgKind.FLOAT, required=required, help=help)

    @property
    def long_flag(self) -> str:
        return f"--{self.name}"

    @property
    def short_flag(self) -> str | None:
        return f"-{self.short}" if self.short else None

    @property
    def flags(self) -> tuple[str, ...]:
        """Short flag (if any) followed by the long flag."""
        if self.short_flag:
            return (self.short_flag, self.long_flag)
        return (self.long_flag,)

    @property
    def takes_value(self) -> bool:
        return self.kind.takes_value

    @property
    def placeholder(self) -> str:
        """Value placeholder shown in usage text, e.g. `PATH`."""
        return self.name.upper()

    def matches(self, token: str) -> bool:
        """
        Check whether a token selects this argument.

        Matching is exact: `--<name>`, or `-<short>` when the token is a single
        dash followed by exactly one character. Prefixes and bundles never match.
        """
        if token == self.long_flag:
            return True
        return (
            self.short is not None
            and len(token) == 2
            and token[0] == "-"
            and token[1] == self.short
        )

    def get_sample_text(self) -> str:
        """Long name with its placeholder, as shown in the options table."""
        if self.takes_value:
            return f"{self.name} <{self.placeholder}>"
        return self.name

    def get_usage_text(self) -> str:
        """Long flag with its placeholder, as shown in the usage line."""
        return f"--{self.get_sample_text()}"

