# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Validation of resolved inputs.

Basic validity (`validate` / `is_valid`) checks, in order:
1. every value coerces to the declared value type,
2. a required argument has at least one value,
3. an argument that cannot be empty has no null or empty values.

The first failing rule decides the outcome.

Post-parse checks (`run_check`) are selected by a declaration's user tag and
look at the filesystem path given by the input's first value:

    d     directory must exist
    !d    directory must not exist
    f     file must exist
    !f    file must not exist
    fail  always fails

Unknown tags perform no check.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable

from gotopts.exceptions import CoercionError
from gotopts.logger import logger
from gotopts.parser.declaration import Argument, Option
from gotopts.parser.resolved import ResolvedInput


class ValidationOutcome(Enum):
    VALID = "valid"
    INVALID_TYPE = "invalid_type"
    MISSING_VALUE = "missing_value"
    EMPTY_VALUE = "empty_value"

    @property
    def ok(self) -> bool:
        return self is ValidationOutcome.VALID


def validate(resolved: ResolvedInput) -> ValidationOutcome:
    """Return the outcome of the basic validity rules for `resolved`."""
    try:
        values = resolved.typed_values()
    except CoercionError as error:
        logger.debug("%s '%s' is invalid: %s", resolved.kind.label, resolved.name, error)
        return ValidationOutcome.INVALID_TYPE

    match resolved.declaration:
        case Argument(required=required, can_be_empty=can_be_empty):
            if required and not values:
                return ValidationOutcome.MISSING_VALUE
            if not can_be_empty and any(
                value is None or str(value) == "" for value in values
            ):
                return ValidationOutcome.EMPTY_VALUE
        case Option():
            pass
    return ValidationOutcome.VALID


def is_valid(resolved: ResolvedInput) -> bool:
    return validate(resolved).ok


def _directory_exists(value: str) -> str | None:
    return None if Path(value).is_dir() else f"directory '{value}' does not exist"


def _directory_absent(value: str) -> str | None:
    return f"directory '{value}' already exists" if Path(value).is_dir() else None


def _file_exists(value: str) -> str | None:
    return None if Path(value).is_file() else f"file '{value}' does not exist"


def _file_absent(value: str) -> str | None:
    return f"file '{value}' already exists" if Path(value).is_file() else None


def _always_fail(value: str) -> str | None:
    return "FAIL."


CHECKS: dict[str, Callable[[str], str | None]] = {
    "d": _directory_exists,
    "!d": _directory_absent,
    "f": _file_exists,
    "!f": _file_absent,
    "fail": _always_fail,
}


def check_failure(tag: str | None, value: str) -> str | None:
    """
    Run the post-parse check selected by `tag` against `value`.

    Returns:
        str | None: Failure detail, or None if the check passed or `tag` selects
        no check. Errors raised while checking are returned as `Error: <message>`.
    """
    check = CHECKS.get(tag) if tag is not None else None
    if check is None:
        return None
    try:
        return check(value)
    except Exception as error:
        logger.debug("Check '%s' raised for '%s': %r", tag, value, error)
        return f"Error: {error}"


def run_check(resolved: ResolvedInput) -> str | None:
    """
    Run the post-parse check for a resolved input.

    Only inputs with a value and a user tag are checked.

    Returns:
        str | None: `<argument|option> <name>: <detail>` on failure, otherwise None.
    """
    if resolved.user_data is None or not resolved.value_exists:
        return None
    value = resolved.value_text() or ""
    failure = check_failure(resolved.user_data, value)
    if failure is None:
        return None
    logger.debug(
        "Check '%s' failed for %s '%s': %s",
        resolved.user_data,
        resolved.kind.label,
        resolved.name,
        failure,
    )
    return f"{resolved.kind.label} {resolved.name}: {failure}"
