"""
Argkit Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg import Arg
from .arg_kind import ArgKind
from .arg_map import ArgMap
from .arg_parser import ArgParser
from .arg_value import ABSENT, Absent, ArgValue, BooleanValue, TextValue

__all__ = [
    "Arg",
    "ArgKind",
    "ArgMap",
    "ArgParser",
    "ArgValue",
    "Absent",
    "ABSENT",
    "BooleanValue",
    "TextValue",
]
