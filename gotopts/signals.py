# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines flow control signals used internally by gotopts tools.

These signals are raised to interrupt parsing once informational output
(help, version, options listing) has been rendered, without being treated as
errors.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Help was rendered.
- VersionSignal: Version was rendered.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in gotopts.

    These are not errors. The tool runtime maps them to a successful exit.
    """


class HelpSignal(FlowSignal):
    """Raised after help information has been displayed."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised after version information has been displayed."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
