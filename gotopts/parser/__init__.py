"""
GotOpts

Copyright (c) 2025 Spencer James.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_line_parser import CommandLineParser, ParseResult
from .declaration import Argument, InputDeclaration, Option
from .decoder import decode_argument, decode_option
from .input_type import InputKind, OptionType
from .resolved import ResolvedInput
from .validation import ValidationOutcome, is_valid, run_check, validate
from .value_type import ValueType

__all__ = [
    "Argument",
    "CommandLineParser",
    "InputDeclaration",
    "InputKind",
    "Option",
    "OptionType",
    "ParseResult",
    "ResolvedInput",
    "ValidationOutcome",
    "ValueType",
    "decode_argument",
    "decode_option",
    "is_valid",
    "run_check",
    "validate",
]
