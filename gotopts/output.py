# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Wire format shared by `ShellScriptCli` and `GotOptsCli`.

Validated inputs are encoded as one blob delimited by `[` and `]`, with one
line per input in declaration order:

    [opt_m="xyz,abc"
    arg_arg1="foo bar"
    ]

Values are joined with `,` and are not escaped; values containing commas or
double quotes cannot be told apart from the delimiters.

The brackets let `GotOptsCli` distinguish data (to re-emit, optionally with a
name prefix) from plain help or diagnostic text (to pass through unchanged).
Script arguments are forwarded to the inner tool the same way, as
`[token1|token2|...]`.
"""
from __future__ import annotations

from typing import Iterable

from gotopts.exceptions import CommandArgumentError
from gotopts.parser.resolved import ResolvedInput

BLOB_START = "["
BLOB_END = "]"
VALUE_SEPARATOR = ","
DEFAULT_ARGUMENTS_DELIMITER = "|"


def encode_input(resolved: ResolvedInput) -> str:
    """
    Encode one input as `<arg|opt>_<name>="<values>"`.

    Values are emitted as written on the command line (or as declared defaults),
    not in their coerced form.
    """
    values = VALUE_SEPARATOR.join(resolved.values)
    return f'{resolved.kind.prefix}_{resolved.name}="{values}"'


def encode_inputs(inputs: Iterable[ResolvedInput]) -> str:
    """Encode inputs into a bracketed blob, one newline-terminated line each."""
    lines = "".join(f"{encode_input(resolved)}\n" for resolved in inputs)
    return f"{BLOB_START}{lines}{BLOB_END}"


def is_wrapped(text: str) -> bool:
    return text.startswith(BLOB_START) and text.endswith(BLOB_END)


def unwrap_output(text: str, prefix: str | None = None) -> list[str]:
    """
    Return the lines of an encoded blob, each prefixed with `<prefix>_` when a
    prefix is given. Empty lines are dropped.

    Raises:
        ValueError: If `text` is not a bracketed blob.
    """
    if not is_wrapped(text):
        raise ValueError("Text is not wrapped in box brackets")
    name_prefix = f"{prefix}_" if prefix is not None else ""
    return [f"{name_prefix}{line}" for line in text[1:-1].split("\n") if line]


def split_arguments(
    blob: str, delimiter: str = DEFAULT_ARGUMENTS_DELIMITER
) -> list[str]:
    """
    Split a bracketed script-arguments blob into command line tokens.

    An empty blob yields no tokens.

    Raises:
        CommandArgumentError: If a non-empty blob is not wrapped in brackets.
    """
    if blob == "":
        return []
    if not is_wrapped(blob):
        raise CommandArgumentError("Invalid arguments provided to script.")
    interior = blob[1:-1]
    if not delimiter:
        return [interior]
    return interior.split(delimiter)
