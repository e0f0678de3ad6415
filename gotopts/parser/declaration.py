# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines the `Option` and `Argument` dataclasses, the two variants of a command
line input declaration.

A declaration describes a named input independently of any invocation: its
description, declared value type, default values and an opaque user tag used to
select a post-parse check. Values are bound to a declaration by the parser,
producing a `ResolvedInput`.

Key Attributes (shared):
- `description`: Help text
- `value_type`: `ValueType` that values are coerced to
- `default_values`: Values used when none are given (first is primary)
- `user_data`: Opaque tag, e.g. `d` or `!f` for filesystem checks

Option-specific:
- `template`: Aliases separated by `|`, e.g. `-m|--multiple`
- `option_type`: `OptionType` (no-value, single-value, multiple-value)

Argument-specific:
- `name`: Positional name
- `required`: Must have at least one value
- `can_be_empty`: Empty string values are accepted; implies `required`

Code that needs to tell the variants apart matches on the class:

    match declaration:
        case Option(): ...
        case Argument(): ...
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from gotopts.exceptions import DeclarationError
from gotopts.parser.input_type import InputKind, OptionType
from gotopts.parser.value_type import ValueType

DEFAULT_REQUIRED = True
DEFAULT_CAN_BE_EMPTY = False

TEMPLATE_SEPARATOR = re.compile(r"[|\s]+")


def _merge_defaults(
    default_value: str | None, default_values: list[str] | None
) -> list[str]:
    if default_value is not None and default_values is not None:
        raise DeclarationError(
            "Cannot specify both default_value and default_values."
        )
    if default_value is not None:
        return [default_value]
    return list(default_values or [])


@dataclass
class Option:
    """
    Represents a command line option.

    Attributes:
        template (str): Flags separated by `|`, e.g. `-s|--single`.
        description (str): Help text for the option.
        option_type (OptionType): How many values the option takes.
        default_value (str | None): Single default value.
        default_values (list[str] | None): Default values. Exclusive with `default_value`.
        value_type (ValueType): Type values are coerced to.
        user_data (str | None): Tool-specific tag.
    """

    template: str
    description: str = ""
    option_type: OptionType = OptionType.NO_VALUE
    default_value: str | None = None
    default_values: list[str] | None = None
    value_type: ValueType = ValueType.STRING
    user_data: str | None = None
    short_name: str | None = field(init=False, default=None)
    long_name: str | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.option_type == OptionType.NO_VALUE and (
            self.default_value is not None or self.default_values is not None
        ):
            raise DeclarationError(
                "Cannot specify default_value or default_values for no-value options."
            )
        if self.option_type == OptionType.NO_VALUE and self.value_type != ValueType.STRING:
            raise DeclarationError(
                f"Cannot specify value_type other than {ValueType.STRING} for no-value options."
            )
        self.default_values = _merge_defaults(self.default_value, self.default_values)
        self.default_value = self.default_values[0] if self.default_values else None
        self._parse_template()

    def _parse_template(self) -> None:
        for part in TEMPLATE_SEPARATOR.split(self.template.strip()):
            if not part:
                continue
            if part.startswith("--") and len(part) > 2:
                self.long_name = part[2:]
            elif part.startswith("-") and not part.startswith("--") and len(part) > 1:
                self.short_name = part[1:]
            else:
                raise DeclarationError(f"Invalid template pattern '{self.template}'")
        if not self.short_name and not self.long_name:
            raise DeclarationError(f"Invalid template pattern '{self.template}'")

    @property
    def name(self) -> str:
        """Short name if present, otherwise long name."""
        return self.short_name or self.long_name or ""

    @property
    def flags(self) -> tuple[str, ...]:
        flags = []
        if self.short_name:
            flags.append(f"-{self.short_name}")
        if self.long_name:
            flags.append(f"--{self.long_name}")
        return tuple(flags)

    @property
    def kind(self) -> InputKind:
        return InputKind.for_option(self.option_type)

    @property
    def takes_value(self) -> bool:
        return self.option_type != OptionType.NO_VALUE

    def __str__(self) -> str:
        return (
            f"Option(template='{self.template}', type={self.option_type}, "
            f"value_type={self.value_type})"
        )


@dataclass
class Argument:
    """
    Represents a positional command line argument.

    Attributes:
        name (str): Argument name.
        description (str): Help text for the argument.
        required (bool): True if a value must be given. Forced true by `can_be_empty`.
        can_be_empty (bool): True if an empty string is an acceptable value.
        default_value (str | None): Single default value.
        default_values (list[str] | None): Default values. Exclusive with `default_value`.
        value_type (ValueType): Type values are coerced to.
        user_data (str | None): Tool-specific tag.
    """

    name: str
    description: str = ""
    required: bool = DEFAULT_REQUIRED
    can_be_empty: bool = DEFAULT_CAN_BE_EMPTY
    default_value: str | None = None
    default_values: list[str] | None = None
    value_type: ValueType = ValueType.STRING
    user_data: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise DeclarationError("Argument name is required.")
        self.default_values = _merge_defaults(self.default_value, self.default_values)
        self.default_value = self.default_values[0] if self.default_values else None
        # can be empty implies required
        self.required = self.required or self.can_be_empty

    @property
    def kind(self) -> InputKind:
        return InputKind.for_argument(self.required, self.can_be_empty)

    def __str__(self) -> str:
        return (
            f"Argument(name='{self.name}', value_type={self.value_type}, "
            f"required={self.required}, can_be_empty={self.can_be_empty})"
        )


InputDeclaration = Union[Option, Argument]
