"""
Argkit Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgKitError,
    ArgumentDefinitionError,
    ArgumentParseError,
    ConfigError,
    DuplicateNameError,
    DuplicateShortError,
    InvalidValueError,
    MissingRequiredArgumentError,
    MissingValueError,
    UnrecognizedArgumentError,
)
from .parser import Arg, ArgKind, ArgMap, ArgParser
from .signals import HelpSignal

logger = logging.getLogger("argkit")

__version__ = "0.1.0"

__all__ = [
    "Arg",
    "ArgKind",
    "ArgMap",
    "ArgParser",
    "HelpSignal",
    "ArgKitError",
    "ArgumentDefinitionError",
    "ArgumentParseError",
    "ConfigError",
    "DuplicateNameError",
    "DuplicateShortError",
    "InvalidValueError",
    "MissingRequiredArgumentError",
    "MissingValueError",
    "UnrecognizedArgumentError",
]
