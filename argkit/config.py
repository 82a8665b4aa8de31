# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Definition-file loader for argkit parsers.

A definition file declares a parser the same way code would:

    description: Find duplicate files.
    program: dupes
    args:
      - name: verbose
        short: V
        kind: boolean
        help: Verbose execution
      - name: path
        short: f
        kind: string
        required: true
        help: Directory to examine

YAML (`.yaml`, `.yml`) and TOML (`.toml`, using `[[args]]` tables) are supported.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console

from argkit.exceptions import ConfigError
from argkit.logger import logger
from argkit.parser.arg import Arg
from argkit.parser.arg_kind import ArgKind
from argkit.parser.arg_parser import ArgParser


class RawArg(BaseModel):
    """One entry of the `args` list in a definition file."""

    name: str
    short: str | None = None
    kind: ArgKind = ArgKind.STRING
    required: bool = False
    help: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgKind:
        if isinstance(value, ArgKind):
            return value
        return ArgKind(value)

    @field_validator("short", mode="before")
    @classmethod
    def validate_short(cls, value: Any) -> Any:
        # TOML has no null; an empty string means no short alias.
        if value == "":
            return None
        return value

    def to_arg(self) -> Arg:
        return Arg(
            name=self.name,
            short=self.short,
            kind=self.kind,
            required=self.required,
            help=self.help,
        )


class ParserConfig(BaseModel):
    """Top-level definition file model."""

    description: str = ""
    program: str | None = None
    args: list[RawArg] = Field(default_factory=list)

    def to_parser(self, console: Console | None = None) -> ArgParser:
        parser = ArgParser(self.description, program=self.program, console=console)
        for raw_arg in self.args:
            parser.arg(raw_arg.to_arg())
        return parser


def loader(file_path: Path | str, console: Console | None = None) -> ArgParser:
    """
    Build an `ArgParser` from a YAML or TOML definition file.

    Args:
        file_path (Path | str): Path to the definition file.
        console (Console | None): Console for the parser's rendering.

    Returns:
        ArgParser: A parser with every declared argument registered.

    Raises:
        ConfigError: If the file is missing, malformed or fails validation.
        ArgumentDefinitionError: If the declared arguments conflict.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such definition file: {file_path}")

    suffix = path.suffix
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ConfigError(f"Unsupported definition format: {suffix}")

    try:
        content = path.read_text(encoding="UTF-8")
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigError(f"Could not read '{path}': {error}") from error

    try:
        if suffix == ".toml":
            raw_config = toml.loads(content)
        else:
            raw_config = yaml.safe_load(content)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse '{path}': {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Definition file must contain a dictionary with a list of args.\n"
            "Example:\n"
            "description: 'My program'\n"
            "args:\n"
            "  - name: 'path'\n"
            "    kind: 'string'\n"
            "    required: true"
        )

    try:
        parser_config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid definition file '{path}':\n{error}") from error

    logger.debug("Loaded %d argument(s) from %s", len(parser_config.args), path)
    return parser_config.to_parser(console=console)
