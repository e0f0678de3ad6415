# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines all custom exception classes used by gotopts.

These exceptions provide structured error handling for the failure cases of
declaring, parsing and coercing shell script options and arguments.

All exceptions inherit from `GotOptsError`, the base exception for the package.

Exception Hierarchy:
- GotOptsError
    ├── CommandArgumentError
    ├── DeclarationError
    └── CoercionError (also a ValueError)

`CommandArgumentError` is raised by the parser for usage errors on the command
line and is reported to the user as-is. The others indicate bad declarations or
values and are reported as `<ExceptionKind>: <message>` by the tool runtime.
"""


class GotOptsError(Exception):
    """Base exception for gotopts."""


class CommandArgumentError(GotOptsError):
    """Exception raised when command line input cannot be parsed."""


class DeclarationError(GotOptsError):
    """Exception raised when an option or argument declaration is invalid."""


class CoercionError(GotOptsError, ValueError):
    """Exception raised when a value cannot be converted to its declared type."""
