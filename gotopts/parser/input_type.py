# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Kinds of command line inputs.

`OptionType` describes how many values an option takes on the command line.
`InputKind` tags a declaration with both its variant (option or argument) and
its arity or requirement, and is what output and error reporting dispatch on.
"""
from __future__ import annotations

from enum import Enum


class OptionType(Enum):
    """
    Number of values an option accepts.

    Members:
        NO_VALUE: Flag; binds the value `on` when present.
        SINGLE_VALUE: Exactly one value, given at most once.
        MULTIPLE_VALUE: Any number of occurrences, each adding one value.
    """

    NO_VALUE = "no_value"
    SINGLE_VALUE = "single_value"
    MULTIPLE_VALUE = "multiple_value"

    @classmethod
    def from_tag(cls, tag: str | None) -> OptionType:
        """Map a mini-language option tag (`m`, `s`, anything else) to a type."""
        if tag == "m":
            return cls.MULTIPLE_VALUE
        elif tag == "s":
            return cls.SINGLE_VALUE
        return cls.NO_VALUE

    @property
    def badge(self) -> str:
        """Help text badge for the option type."""
        if self is OptionType.SINGLE_VALUE:
            return "§"
        elif self is OptionType.MULTIPLE_VALUE:
            return "+"
        return ""

    def __str__(self) -> str:
        return self.value


class InputKind(Enum):
    ARGUMENT = "argument"
    ARGUMENT_REQUIRED = "argument_required"
    ARGUMENT_CAN_BE_EMPTY = "argument_can_be_empty"
    OPTION_NO_VALUE = "option_no_value"
    OPTION_SINGLE_VALUE = "option_single_value"
    OPTION_MULTI_VALUE = "option_multi_value"

    @classmethod
    def for_option(cls, option_type: OptionType) -> InputKind:
        match option_type:
            case OptionType.MULTIPLE_VALUE:
                return cls.OPTION_MULTI_VALUE
            case OptionType.SINGLE_VALUE:
                return cls.OPTION_SINGLE_VALUE
            case _:
                return cls.OPTION_NO_VALUE

    @classmethod
    def for_argument(cls, required: bool, can_be_empty: bool) -> InputKind:
        if can_be_empty:
            return cls.ARGUMENT_CAN_BE_EMPTY
        elif required:
            return cls.ARGUMENT_REQUIRED
        return cls.ARGUMENT

    @property
    def is_argument(self) -> bool:
        return self.value.startswith("argument")

    @property
    def is_option(self) -> bool:
        return not self.is_argument

    @property
    def label(self) -> str:
        """`argument` or `option`, as used in error messages."""
        return "argument" if self.is_argument else "option"

    @property
    def prefix(self) -> str:
        """`arg` or `opt`, as used in output variable names."""
        return "arg" if self.is_argument else "opt"
