# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgKind`, the enum describing what a command-line argument carries.

A BOOLEAN argument is a flag: its presence sets it to true and it never
consumes a following token. Every other kind is value-bearing and consumes
exactly one following token. INTEGER and FLOAT values are validated while
parsing but stored as text, so typed lookups decide the final Python type.

Supports alias coercion for config-friendly values.

Example:
    ArgKind("boolean") → ArgKind.BOOLEAN
    ArgKind("flag")    → ArgKind.BOOLEAN (via alias)
    ArgKind("int")     → ArgKind.INTEGER (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgKind(Enum):
    """
    Value kinds an `Arg` can declare.

    Members:
        BOOLEAN: Presence flag, no value token.
        STRING: One text value.
        INTEGER: One value that must parse as a whole number.
        FLOAT: One value that must parse as a floating point number.

    Aliases:
        - "bool", "flag" → "boolean"
        - "str", "text" → "string"
        - "int" → "integer"
        - "number" → "float"
    """

    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"

    @classmethod
    def choices(cls) -> list[ArgKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "flag": "boolean",
            "str": "string",
            "text": "string",
            "int": "integer",
            "number": "float",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether arguments of this kind consume the following token."""
        return self is not ArgKind.BOOLEAN

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
