# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Resolved inputs: a declaration together with the values bound to it by one
invocation.

When no values were given on the command line, the declaration's default values
are used instead. Values are coerced to the declared `ValueType` on first read;
a successful coercion is stored in a `Memo` cell and reused, a failed one is
attempted again on the next read.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Generic, Sequence, TypeVar

from gotopts.exceptions import CoercionError
from gotopts.parser.declaration import Argument, InputDeclaration, Option
from gotopts.parser.input_type import InputKind

T = TypeVar("T")

_UNSET = object()


class Memo(Generic[T]):
    """Cell holding the result of `compute`, evaluated on first successful read."""

    def __init__(self, compute: Callable[[], T]) -> None:
        self._compute = compute
        self._value: Any = _UNSET

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        if self._value is _UNSET:
            self._value = self._compute()
        return self._value


class ResolvedInput:
    """
    An option or argument with the raw values parsed for it.

    Attributes:
        declaration (Option | Argument): The input declaration.
        raw_values (list[str]): Values given on the command line, in order.
    """

    def __init__(
        self, declaration: InputDeclaration, raw_values: Sequence[str] | None = None
    ) -> None:
        self.declaration = declaration
        self.raw_values: list[str] = list(raw_values or [])
        self._typed: Memo[list[str | Decimal]] = Memo(self._coerce_all)

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def kind(self) -> InputKind:
        return self.declaration.kind

    @property
    def user_data(self) -> str | None:
        return self.declaration.user_data

    @property
    def is_option(self) -> bool:
        return isinstance(self.declaration, Option)

    @property
    def is_argument(self) -> bool:
        return isinstance(self.declaration, Argument)

    @property
    def given(self) -> bool:
        """True if any value was given on the command line."""
        return bool(self.raw_values)

    @property
    def values(self) -> list[str]:
        """Raw values given on the command line, or the default values."""
        if self.raw_values:
            return list(self.raw_values)
        return list(self.declaration.default_values or [])

    def _coerce_all(self) -> list[str | Decimal]:
        value_type = self.declaration.value_type
        return [value_type.coerce(value) for value in self.values]

    def typed_values(self) -> list[str | Decimal]:
        """
        Return all values coerced to the declared value type.

        Raises:
            CoercionError: If any value cannot be coerced.
        """
        return list(self._typed.get())

    def try_typed_values(self) -> list[str | Decimal] | None:
        """Return the coerced values, or None if any value cannot be coerced."""
        try:
            return self.typed_values()
        except CoercionError:
            return None

    @property
    def value_exists(self) -> bool:
        """True if the input has at least one value that coerces."""
        return bool(self.try_typed_values())

    def value(self) -> str | Decimal:
        """
        Return the first coerced value.

        Raises:
            CoercionError: If any value cannot be coerced.
            LookupError: If there are no values.
        """
        values = self.typed_values()
        if not values:
            raise LookupError(f"No value for {self.kind.label} '{self.name}'")
        return values[0]

    def value_or_none(self) -> str | Decimal | None:
        values = self.try_typed_values()
        return values[0] if values else None

    def value_text(self) -> str | None:
        """First value rendered as text, or None."""
        value = self.value_or_none()
        return None if value is None else str(value)

    def values_text(self) -> list[str]:
        """All coerced values rendered as text."""
        return [str(value) for value in self.typed_values()]

    def __str__(self) -> str:
        shown = ", ".join(self.raw_values) if self.raw_values else "(null)"
        match self.declaration:
            case Option() as option:
                return (
                    f"{option.template}: \"{shown}\", HasValue: {self.given}, "
                    f"ValueType: {option.value_type}, Type: {option.option_type}"
                )
            case Argument() as argument:
                return (
                    f"{argument.name}: \"{shown}\", ValueType: {argument.value_type}, "
                    f"Required: {argument.required}, CanBeEmpty: {argument.can_be_empty}"
                )
        return repr(self)

    def __repr__(self) -> str:
        return f"ResolvedInput({self.declaration!r}, raw_values={self.raw_values!r})"
