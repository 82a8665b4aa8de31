# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value variants stored by `ArgMap` for each argument name.

A parsed value is exactly one of:
- `Absent`: the user did not supply the argument.
- `BooleanValue`: a flag argument was present.
- `TextValue`: a value-bearing argument and the token it consumed.

Keeping absence as its own variant means an empty string supplied by the user
is never confused with an argument that was not supplied at all.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Absent:
    """No value was supplied."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True)
class BooleanValue:
    """Value of a flag argument."""

    value: bool = True


@dataclass(frozen=True)
class TextValue:
    """Raw text consumed by a value-bearing argument."""

    value: str


ArgValue = Absent | BooleanValue | TextValue
