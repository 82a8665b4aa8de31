# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgMap`, the read-only result of a successful `ArgParser.parse()`.

Values are kept as tagged variants (`BooleanValue`, `TextValue`) and converted
only when a caller asks for a type:

    arguments.get("path")                  # str | None
    arguments.get("verbose", bool)         # bool | None
    arguments.get("count", int) or 4       # caller-side default

A lookup never raises. An unset name, a kind mismatch (asking a flag for `str`)
or a failed conversion all return None.
"""
from __future__ import annotations

from types import MappingProxyType, NoneType, UnionType
from typing import Any, Iterator, Mapping, Union, get_args, get_origin

from argkit.logger import logger
from argkit.parser.arg_value import ABSENT, ArgValue, BooleanValue, TextValue
from argkit.parser.utils import coerce_value


class ArgMap:
    """
    Immutable mapping from argument name to the value the user supplied.

    Iteration, `len()` and `in` only consider supplied arguments. Indexing
    returns the stored variant and yields `ABSENT` for anything not supplied.
    """

    def __init__(
        self,
        values: Mapping[str, BooleanValue | TextValue] | None = None,
        names: tuple[str, ...] = (),
    ) -> None:
        self._values: Mapping[str, BooleanValue | TextValue] = MappingProxyType(
            dict(values or {})
        )
        self._names: tuple[str, ...] = tuple(names) or tuple(self._values)

    @property
    def names(self) -> tuple[str, ...]:
        """Every argument name known to the parser that produced this map."""
        return self._names

    def value_of(self, name: str) -> ArgValue:
        """Return the stored variant for `name`, or `ABSENT`."""
        return self._values.get(name, ABSENT)

    def get(self, name: str, type: Any = str) -> Any:
        """
        Get the value for an argument converted to the requested type.

        Args:
            name (str): Name of the argument.
            type (type): `bool` for flags; `str`, `int`, `float` or any type
                supported by `coerce_value` for value-bearing arguments. Unions
                are tried member by member; `bool` only ever selects a flag.

        Returns:
            The converted value, or None when the argument was not supplied,
            its kind does not match `type`, or the conversion failed.
        """
        value = self.value_of(name)
        members = _union_members(type)
        if isinstance(value, BooleanValue):
            return value.value if bool in members else None
        if not isinstance(value, TextValue):
            return None
        # Text never reads as a flag.
        for member in members:
            if member is bool or member is NoneType:
                continue
            if member is str:
                return value.value
            try:
                return coerce_value(value.value, member)
            except Exception as error:
                logger.debug("Lookup of '%s' as %r failed: %s", name, member, error)
        return None

    def get_raw(self, name: str) -> str | None:
        """Return the raw text for an argument; flags read as "true"."""
        value = self.value_of(name)
        if isinstance(value, TextValue):
            return value.value
        if isinstance(value, BooleanValue):
            return "true" if value.value else "false"
        return None

    def has_arg(self, name: str) -> bool:
        """Check whether an argument was passed by the user."""
        return name in self._values

    def to_dict(self) -> dict[str, bool | str]:
        """Return supplied values as plain Python values."""
        return {name: value.value for name, value in self._values.items()}

    def __getitem__(self, name: str) -> ArgValue:
        return self.value_of(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgMap):
            return False
        return dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._values.items())))

    def __repr__(self) -> str:
        return f"ArgMap({self.to_dict()!r})"


def _union_members(target_type: Any) -> tuple[Any, ...]:
    if isinstance(target_type, UnionType) or get_origin(target_type) is Union:
        return get_args(target_type)
    return (target_type,)
