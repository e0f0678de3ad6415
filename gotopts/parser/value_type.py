# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines `ValueType`, the closed set of semantic types an option or argument
value can be declared as, and the coercion from raw command line strings.

Members:
    STRING: Raw string, returned unchanged.
    NUMBER: Plain decimal number, parsed into `decimal.Decimal`.

The declaration mini-language selects a type with `ValueType.from_tag()`:
`n` is NUMBER, any other tag is STRING.

Example:
    ValueType.from_tag("n").coerce("2.50") → Decimal("2.50")
    ValueType.NUMBER.coerce("1e3") → raises CoercionError
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from enum import Enum

from gotopts.exceptions import CoercionError

NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def coerce_string(value: str) -> str:
    return value


def coerce_number(value: str) -> Decimal:
    """
    Convert a string to a `Decimal`.

    Surrounding whitespace is ignored. Only an optional sign, digits and one
    decimal point are accepted: exponents, digit separators, `NaN` and
    `Infinity` are rejected.

    Raises:
        CoercionError: If the value is not a plain decimal number.
    """
    if value is None:
        raise CoercionError("Cannot convert null to a number")
    text = value.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        raise CoercionError(f"Value '{value}' is not a valid number")
    try:
        return Decimal(text)
    except InvalidOperation as error:
        raise CoercionError(f"Value '{value}' is not a valid number") from error


class ValueType(Enum):
    """Declared value type of an option or argument."""

    STRING = "string"
    NUMBER = "number"

    @classmethod
    def from_tag(cls, tag: str | None) -> ValueType:
        """Map a mini-language type tag to a value type. Only `n` is numeric."""
        if tag == "n":
            return cls.NUMBER
        return cls.STRING

    def coerce(self, value: str) -> str | Decimal:
        """Convert `value` to this type, raising `CoercionError` on failure."""
        match self:
            case ValueType.NUMBER:
                return coerce_number(value)
            case _:
                return coerce_string(value)

    def __str__(self) -> str:
        return self.value
