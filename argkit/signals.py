# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the argkit parser.

Signals interrupt parsing without being treated as errors. They inherit from
`FlowSignal`, a subclass of `BaseException`, so they pass through standard
`except Exception` blocks untouched.

Signals:
- HelpSignal: help text was printed and the program should stop successfully.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in argkit.

    These are not errors. They end a parse early on an outcome the caller
    must handle, such as the user asking for help.
    """


class HelpSignal(FlowSignal):
    """Raised after the help screen has been rendered."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
