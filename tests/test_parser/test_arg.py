import pytest

from argkit.exceptions import ArgumentDefinitionError
from argkit.parser import Arg, ArgKind


def test_boolean_constructor():
    arg = Arg.boolean("verbose", "V", "verbose execution")
    assert arg.name == "verbose"
    assert arg.short == "V"
    assert arg.kind is ArgKind.BOOLEAN
    assert arg.required is False
    assert arg.help == "verbose execution"
    assert arg.takes_value is False


def test_string_constructor():
    arg = Arg.string("path", "p", True, "Directory to examine")
    assert arg.kind is ArgKind.STRING
    assert arg.required is True
    assert arg.takes_value is True


@pytest.mark.parametrize(
    "factory,kind",
    [(Arg.integer, ArgKind.INTEGER), (Arg.float, ArgKind.FLOAT)],
)
def test_numeric_constructors(factory, kind):
    arg = factory("count", None, False, "How many")
    assert arg.kind is kind
    assert arg.short is None
    assert arg.takes_value is True


def test_empty_name_is_rejected():
    with pytest.raises(ArgumentDefinitionError):
        Arg.boolean("", None, "nothing")
    with pytest.raises(ArgumentDefinitionError):
        Arg.string("", "x", False, "nothing")


def test_reserved_help_short_is_rejected():
    with pytest.raises(ArgumentDefinitionError, match="reserved"):
        Arg.boolean("hidden", "h", "collides with help")
    with pytest.raises(ArgumentDefinitionError):
        Arg.string("host", "h", True, "collides with help")


@pytest.mark.parametrize("short", ["ab", "-", " ", ""])
def test_malformed_short_is_rejected(short):
    with pytest.raises(ArgumentDefinitionError):
        Arg.boolean("verbose", short, "")


@pytest.mark.parametrize("name", ["--verbose", "two words"])
def test_malformed_name_is_rejected(name):
    with pytest.raises(ArgumentDefinitionError):
        Arg.boolean(name)


def test_required_boolean_is_rejected():
    with pytest.raises(ArgumentDefinitionError, match="cannot be required"):
        Arg(name="verbose", kind=ArgKind.BOOLEAN, required=True)


def test_kind_alias_is_accepted():
    arg = Arg(name="count", kind="int")
    assert arg.kind is ArgKind.INTEGER


def test_invalid_kind_is_rejected():
    with pytest.raises(ArgumentDefinitionError):
        Arg(name="count", kind="decimal")


def test_arg_is_immutable():
    arg = Arg.boolean("verbose")
    with pytest.raises(AttributeError):
        arg.name = "quiet"


def test_flags_and_placeholder():
    arg = Arg.string("path", "p")
    assert arg.long_flag == "--path"
    assert arg.short_flag == "-p"
    assert arg.flags == ("-p", "--path")
    assert arg.placeholder == "PATH"
    assert arg.get_usage_text() == "--path <PATH>"

    flag = Arg.boolean("json")
    assert flag.short_flag is None
    assert flag.flags == ("--json",)
    assert flag.get_usage_text() == "--json"


@pytest.mark.parametrize(
    "token,expected",
    [
        ("--path", True),
        ("-p", True),
        ("--pat", False),
        ("--path=x", False),
        ("-path", False),
        ("-pq", False),
        ("path", False),
        ("p", False),
    ],
)
def test_matches_is_exact(token, expected):
    assert Arg.string("path", "p").matches(token) is expected


def test_equality():
    assert Arg.string("path", "p", True, "x") == Arg.string("path", "p", True, "x")
    assert Arg.string("path", "p") != Arg.string("path", "q")
    assert hash(Arg.boolean("json")) == hash(Arg.boolean("json"))

