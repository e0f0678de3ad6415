# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Decodes the compact declaration mini-language into `Argument` and `Option`
declarations.

Each declaration is one semicolon-delimited string. The first two fields (name
or template, and description) are mandatory; the remaining fields are optional,
introduced by a one-letter tag, and must appear in this relative order:

    Argument  'name;description(;r:required)?(;e:canBeEmpty)?(;f:func)?(;t:type)?(;d:default)?'
    Option    'template;description(;o:optionType)?(;f:func)?(;t:type)?(;d:default)?'

Field values:
    required|canBeEmpty  `1` or `t` is true, `0` or `f` is false
    optionType           `m` multiple values, `s` single value, otherwise no value
    type                 `n` number, otherwise string
    func                 post-parse check tag (see `gotopts.parser.validation`)
    default              default value, used verbatim

Option templates separate aliases with commas (`-m,--multiple`); the commas are
rewritten to the `|` separator used by `Option`.

A string that does not match its pattern produces no declaration. This is not
reported: the entry is dropped and only a debug record is logged.

Example:
    decode_argument("arg3;Argument 3;r:0;d:three")
    → Argument(name="arg3", description="Argument 3", required=False,
               default_value="three")
"""
from __future__ import annotations

import re
from typing import Iterable

from gotopts.logger import logger
from gotopts.parser.declaration import (
    DEFAULT_CAN_BE_EMPTY,
    DEFAULT_REQUIRED,
    Argument,
    Option,
)
from gotopts.parser.input_type import OptionType
from gotopts.parser.value_type import ValueType
from gotopts.utils import equal_to_any

ARGUMENT_PATTERN = re.compile(
    r"^(?P<name>[a-z0-9_]+?);(?P<desc>.*?)"
    r"(;r:(?P<req>[01ft]))?(;e:(?P<cbe>[01ft]))?"
    r"(;f:(?P<func>.*?))?(;t:(?P<type>.*?))?(;d:(?P<default>.*?))?$",
    re.IGNORECASE,
)

OPTION_PATTERN = re.compile(
    r"^(?P<temp>[a-z0-9_\-,]+?);(?P<desc>.*?)"
    r"(;o:(?P<opt>.*?))?"
    r"(;f:(?P<func>.*?))?(;t:(?P<type>.*?))?(;d:(?P<default>.*?))?$",
    re.IGNORECASE,
)

ALIAS_SEPARATOR = "|"


def parse_flag(value: str | None, default: bool) -> bool:
    """Decode a boolean field: `1`/`t` is true, other values false, None the default."""
    if value is None:
        return default
    return equal_to_any(value, "1", "t")


def decode_argument(text: str) -> Argument | None:
    """
    Decode one argument declaration.

    Returns:
        Argument | None: The declaration, or None if `text` does not match the
        argument pattern.

    Raises:
        DeclarationError: If the fields match but describe an invalid argument.
    """
    match = ARGUMENT_PATTERN.match(text)
    if not match:
        logger.debug("Dropped argument declaration that does not match: %r", text)
        return None
    return Argument(
        match["name"],
        match["desc"],
        required=parse_flag(match["req"], DEFAULT_REQUIRED),
        can_be_empty=parse_flag(match["cbe"], DEFAULT_CAN_BE_EMPTY),
        default_value=match["default"],
        value_type=ValueType.from_tag(match["type"]),
        user_data=match["func"],
    )


def decode_option(text: str) -> Option | None:
    """
    Decode one option declaration.

    Returns:
        Option | None: The declaration, or None if `text` does not match the
        option pattern.

    Raises:
        DeclarationError: If the fields match but describe an invalid option,
        e.g. a default value on a no-value option.
    """
    match = OPTION_PATTERN.match(text)
    if not match:
        logger.debug("Dropped option declaration that does not match: %r", text)
        return None
    return Option(
        match["temp"].replace(",", ALIAS_SEPARATOR),
        match["desc"],
        option_type=OptionType.from_tag(match["opt"]),
        default_value=match["default"],
        value_type=ValueType.from_tag(match["type"]),
        user_data=match["func"],
    )


def decode_arguments(texts: Iterable[str]) -> list[Argument]:
    """Decode argument declarations in order, dropping those that do not match."""
    arguments = []
    for text in texts:
        argument = decode_argument(text)
        if argument is not None:
            arguments.append(argument)
    return arguments


def decode_options(texts: Iterable[str]) -> list[Option]:
    """Decode option declarations in order, dropping those that do not match."""
    options = []
    for text in texts:
        option = decode_option(text)
        if option is not None:
            options.append(option)
    return options
