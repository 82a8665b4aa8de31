import io

import pytest
from rich.console import Console

from argkit import Arg, ArgParser


@pytest.fixture
def plain_console():
    """Console without colors writing to an in-memory buffer."""
    return Console(file=io.StringIO(), color_system=None, width=200)


@pytest.fixture
def dupes_parser(plain_console):
    return (
        ArgParser("Find duplicate files.", program="dupes", console=plain_console)
        .arg(Arg.boolean("verbose", "V", "verbose execution"))
        .arg(Arg.boolean("recurse", "r", "Recursive execution"))
        .arg(Arg.boolean("json", None, "Format output as JSON"))
        .arg(Arg.string("path", "f", True, "Directory to examine"))
    )
