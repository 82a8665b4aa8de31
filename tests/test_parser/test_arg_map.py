from decimal import Decimal
from enum import Enum
from typing import Literal, Optional

import pytest

from argkit.parser import ABSENT, ArgMap, BooleanValue, TextValue


class Mode(Enum):
    FAST = "fast"
    SAFE = "safe"


@pytest.fixture
def arguments():
    return ArgMap(
        {
            "verbose": BooleanValue(True),
            "path": TextValue("/tmp"),
            "count": TextValue("42"),
            "ratio": TextValue("0.5"),
            "empty": TextValue(""),
            "mode": TextValue("fast"),
        },
        names=("verbose", "json", "path", "count", "ratio", "empty", "mode"),
    )


def test_get_string(arguments):
    assert arguments.get("path") == "/tmp"
    assert arguments.get("path", str) == "/tmp"


def test_get_boolean(arguments):
    assert arguments.get("verbose", bool) is True


def test_get_integer(arguments):
    assert arguments.get("count", int) == 42
    assert arguments.get("path", int) is None


def test_get_float_enum_literal(arguments):
    assert arguments.get("ratio", float) == 0.5
    assert arguments.get("mode", Mode) is Mode.FAST
    assert arguments.get("mode", Literal["fast", "safe"]) == "fast"
    assert arguments.get("mode", Literal["slow"]) is None


def test_unset_name_is_none(arguments):
    assert arguments.get("json", bool) is None
    assert arguments.get("json") is None
    assert arguments.get("never-registered", int) is None


def test_kind_mismatch_is_none(arguments):
    assert arguments.get("verbose", str) is None
    assert arguments.get("verbose", int) is None
    assert arguments.get("path", bool) is None


def test_empty_string_is_not_absent(arguments):
    assert arguments.get("empty") == ""
    assert arguments.has_arg("empty")
    assert arguments.value_of("empty") == TextValue("")
    assert arguments.get("empty", int) is None


def test_value_of(arguments):
    assert arguments.value_of("verbose") == BooleanValue(True)
    assert arguments.value_of("json") is ABSENT
    assert arguments["json"] is ABSENT
    assert not arguments["json"]


def test_get_raw(arguments):
    assert arguments.get_raw("count") == "42"
    assert arguments.get_raw("verbose") == "true"
    assert arguments.get_raw("json") is None


def test_has_arg_and_container_protocol(arguments):
    assert arguments.has_arg("path")
    assert not arguments.has_arg("json")
    assert "path" in arguments
    assert "json" not in arguments
    assert len(arguments) == 6
    assert set(arguments) == {"verbose", "path", "count", "ratio", "empty", "mode"}
    assert "json" in arguments.names


def test_to_dict(arguments):
    assert arguments.to_dict()["verbose"] is True
    assert arguments.to_dict()["count"] == "42"


def test_is_read_only(arguments):
    with pytest.raises(TypeError):
        arguments._values["path"] = TextValue("/etc")


def test_equality():
    assert ArgMap({"a": TextValue("1")}) == ArgMap({"a": TextValue("1")})
    assert ArgMap({"a": TextValue("1")}) != ArgMap({"a": TextValue("2")})
    assert ArgMap() != {}
    assert repr(ArgMap({"a": BooleanValue(True)})) == "ArgMap({'a': True})"


def test_optional_bool_reads_flags_only(arguments):
    assert arguments.get("verbose", Optional[bool]) is True
    assert arguments.get("verbose", bool | None) is True
    assert arguments.get("mode", Optional[bool]) is None
    assert arguments.get("json", Optional[bool]) is None


def test_union_tries_members_in_order(arguments):
    assert arguments.get("count", Optional[int]) == 42
    assert arguments.get("path", int | str) == "/tmp"
    assert arguments.get("count", bool | int) == 42
    assert arguments.get("verbose", int | str) is None


def test_failed_conversion_is_none(arguments):
    class Empty(Enum):
        pass

    assert arguments.get("mode", Decimal) is None
    assert arguments.get("count", Decimal) == Decimal("42")
    assert arguments.get("mode", Empty) is None
