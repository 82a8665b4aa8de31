# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argkit.

Definition errors are raised while arguments are being declared or registered
and indicate a programming mistake. Parse errors are raised while scanning a
token list and indicate bad user input; they carry the rendered usage line so a
caller can show it next to the message.

All exceptions inherit from `ArgKitError`, the base exception for the package.

Exception Hierarchy:
- ArgKitError
    ├── ArgumentDefinitionError
    │   ├── DuplicateNameError
    │   └── DuplicateShortError
    ├── ArgumentParseError
    │   ├── UnrecognizedArgumentError
    │   ├── MissingValueError
    │   ├── InvalidValueError
    │   └── MissingRequiredArgumentError
    └── ConfigError

The help flag is not an error and is signalled with `argkit.signals.HelpSignal`.
"""
from __future__ import annotations


class ArgKitError(Exception):
    """Base exception for argkit."""


class ArgumentDefinitionError(ArgKitError):
    """Exception raised when an argument is declared with invalid metadata."""


class DuplicateNameError(ArgumentDefinitionError):
    """Exception raised when an argument name is already registered or reserved."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Argument '--{name}' is already defined")


class DuplicateShortError(ArgumentDefinitionError):
    """Exception raised when a short alias is already registered or reserved."""

    def __init__(self, short: str, message: str | None = None):
        self.short = short
        super().__init__(message or f"Short alias '-{short}' is already defined")


class ArgumentParseError(ArgKitError):
    """
    Base exception for user input that cannot be parsed.

    Attributes:
        reason (str): What went wrong, without the usage line.
        usage (str): The usage line of the parser that raised the error.
    """

    def __init__(self, reason: str, usage: str = ""):
        self.reason = reason
        self.usage = usage
        message = f"{reason}:\n{usage}" if usage else reason
        super().__init__(message)


class UnrecognizedArgumentError(ArgumentParseError):
    """Exception raised for a token that matches no registered argument."""

    def __init__(self, token: str, usage: str = "", hint: str = ""):
        self.token = token
        reason = f"Unrecognized argument '{token}'"
        if hint:
            reason = f"{reason}. {hint}"
        super().__init__(reason, usage)


class MissingValueError(ArgumentParseError):
    """Exception raised when a value argument is the last token."""

    def __init__(self, name: str, token: str, usage: str = ""):
        self.name = name
        self.token = token
        super().__init__(f"Missing value for argument '{token}'", usage)


class InvalidValueError(ArgumentParseError):
    """Exception raised when a numeric argument receives a value it cannot hold."""

    def __init__(self, name: str, value: str, expected: str, usage: str = ""):
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(f"Cannot convert '{value}' for '--{name}' into {expected}", usage)


class MissingRequiredArgumentError(ArgumentParseError):
    """Exception raised when required arguments were not supplied."""

    def __init__(self, names: list[str], usage: str = ""):
        self.names = list(names)
        flags = ", ".join(f"--{name}" for name in self.names)
        super().__init__(f"Missing required argument ({flags})", usage)


class ConfigError(ArgKitError):
    """Exception raised when a definition file cannot be loaded."""
