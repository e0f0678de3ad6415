# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
This module implements `CommandLineParser`, the parsing engine behind gotopts
tools. It binds command line tokens to `Option` and `Argument` declarations and
renders help with rich.

It is intentionally small: options are flagged by their template aliases and
take zero, one or many values; arguments are positional and take exactly one
token each, in declaration order.

Key Features:
- Declarative registration via `add_option()` / `add_argument()`
- `--long value`, `--long=value`, `-s value`, `-s=value` and `-s:value` forms
- No-value options bind the literal `on`
- `--` ends option processing
- Reserved help, version and options-listing flags
- Rich-powered help rendering

Public Interface:
- `add_option(...)` / `add_argument(...)`: Register declarations.
- `parse_args(...)`: Bind tokens, returning a `ParseResult`.
- `render_help()`: Print the help text.
- `render_listing(...)`: Print parsed options and arguments.

Example Usage:
    parser = CommandLineParser("foo", "Does Foo Things")
    parser.add_option(Option("-s|--single", "Single", OptionType.SINGLE_VALUE))
    parser.add_argument(Argument("path", "Path to use"))

    result = parser.parse_args(["--single=x", "./here"])
    result.get_option("s").value()   # 'x'
    result.get_argument("path").value()  # './here'
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from gotopts.console import make_console
from gotopts.exceptions import CommandArgumentError
from gotopts.logger import logger
from gotopts.parser.declaration import TEMPLATE_SEPARATOR, Argument, Option
from gotopts.parser.input_type import OptionType
from gotopts.parser.resolved import ResolvedInput
from gotopts.signals import HelpSignal, VersionSignal

OPTIONS_AND_ARGUMENTS_FLAG = "--opts-args"
VERSION_FLAG = "--version"
VALUE_SEPARATORS = ("=", ":")
NO_VALUE_TOKEN = "on"


class ReservedFlag(Enum):
    HELP = "help"
    VERSION = "version"
    OPTIONS_AND_ARGUMENTS = "opts_args"


@dataclass
class ParseResult:
    """Resolved options and arguments of one invocation, in declaration order."""

    options: list[ResolvedInput] = field(default_factory=list)
    arguments: list[ResolvedInput] = field(default_factory=list)
    show_options_and_arguments: bool = False

    def get_option(self, name: str) -> ResolvedInput:
        option = self.get_option_or_none(name)
        if option is None:
            raise KeyError(f"No option named '{name}'")
        return option

    def get_option_or_none(self, name: str) -> ResolvedInput | None:
        for resolved in self.options:
            option = resolved.declaration
            if name in (option.short_name, option.long_name):
                return resolved
        return None

    def get_argument(self, name: str) -> ResolvedInput:
        argument = self.get_argument_or_none(name)
        if argument is None:
            raise KeyError(f"No argument named '{name}'")
        return argument

    def get_argument_or_none(self, name: str) -> ResolvedInput | None:
        return next((a for a in self.arguments if a.name == name), None)

    def inputs(self) -> list[ResolvedInput]:
        """Options followed by arguments."""
        return [*self.options, *self.arguments]


class CommandLineParser:
    """
    Parser for one gotopts tool or command.

    Attributes:
        name (str): Program name shown in usage.
        title (str): Title shown at the top of help.
        version (str | None): Enables `--version` when set.
        bottom_help_text (str | None): Text shown at the bottom of help.
        help_option_template (str | None): Help flags, e.g. `--help`. None disables help.
        options_and_arguments_option (bool): Enables `--opts-args`.
        use_ansi_colors (bool): Style help with colors.
    """

    def __init__(
        self,
        name: str,
        title: str = "",
        version: str | None = None,
        bottom_help_text: str | None = None,
        help_option_template: str | None = "--help",
        options_and_arguments_option: bool = False,
        use_ansi_colors: bool = True,
        console: Console | None = None,
    ) -> None:
        self.name: str = name
        self.title: str = title
        self.version: str | None = version
        self.bottom_help_text: str | None = bottom_help_text
        self.help_option_template: str | None = help_option_template
        self.use_ansi_colors: bool = use_ansi_colors
        self.console: Console = console or make_console(sys.stdout, use_ansi_colors)
        self._options: list[Option] = []
        self._arguments: list[Argument] = []
        self._flag_map: dict[str, Option] = {}
        self._argument_names: set[str] = set()
        self._reserved: dict[str, ReservedFlag] = {}
        self._reserved_help: list[tuple[str, str]] = []
        self._commands: list[tuple[str, str]] = []
        if help_option_template and help_option_template.strip():
            self._add_reserved(
                help_option_template, ReservedFlag.HELP, "Show help information"
            )
        if options_and_arguments_option:
            self._add_reserved(
                OPTIONS_AND_ARGUMENTS_FLAG,
                ReservedFlag.OPTIONS_AND_ARGUMENTS,
                "Show options and arguments and exit.",
            )
        if version and version.strip():
            self._add_reserved(
                VERSION_FLAG, ReservedFlag.VERSION, "Show version information"
            )

    @property
    def options(self) -> list[Option]:
        return list(self._options)

    @property
    def arguments(self) -> list[Argument]:
        return list(self._arguments)

    @property
    def help_flag(self) -> str | None:
        """The first help flag, as shown in error hints."""
        for flag, reserved in self._reserved.items():
            if reserved == ReservedFlag.HELP:
                return flag
        return None

    def _add_reserved(self, template: str, reserved: ReservedFlag, help: str) -> None:
        flags = [flag for flag in TEMPLATE_SEPARATOR.split(template.strip()) if flag]
        for flag in flags:
            if not flag.startswith("-"):
                raise CommandArgumentError(f"Invalid template pattern '{template}'")
            self._reserved[flag] = reserved
        self._reserved_help.append(("|".join(flags), help))

    def add_option(self, option: Option) -> None:
        """
        Register an option.

        Raises:
            CommandArgumentError: If one of its flags is already in use.
        """
        for flag in option.flags:
            if flag in self._flag_map or flag in self._reserved:
                raise CommandArgumentError(
                    f"Flag '{flag}' is already used by another option"
                )
        for flag in option.flags:
            self._flag_map[flag] = option
        self._options.append(option)

    def add_options(self, options: Iterable[Option]) -> None:
        for option in options:
            self.add_option(option)

    def add_argument(self, argument: Argument) -> None:
        """
        Register a positional argument.

        Raises:
            CommandArgumentError: If an argument with the same name exists.
        """
        if argument.name in self._argument_names:
            raise CommandArgumentError(
                f"Argument '{argument.name}' is already defined"
            )
        self._argument_names.add(argument.name)
        self._arguments.append(argument)

    def add_arguments(self, arguments: Iterable[Argument]) -> None:
        for argument in arguments:
            self.add_argument(argument)

    def add_command_summary(self, name: str, help: str) -> None:
        """List a sub-command in this parser's help."""
        self._commands.append((name, help))

    def _split_token(self, token: str) -> tuple[str, str | None]:
        """Split `--name=value` style tokens into flag and inline value."""
        if token in self._flag_map or token in self._reserved:
            return token, None
        positions = [token.find(sep) for sep in VALUE_SEPARATORS if sep in token]
        if not positions:
            return token, None
        index = min(positions)
        return token[:index], token[index + 1 :]

    def _handle_reserved(self, reserved: ReservedFlag, result: ParseResult) -> None:
        match reserved:
            case ReservedFlag.HELP:
                self.render_help()
                raise HelpSignal()
            case ReservedFlag.VERSION:
                self.render_version()
                raise VersionSignal()
            case ReservedFlag.OPTIONS_AND_ARGUMENTS:
                result.show_options_and_arguments = True

    def parse_args(self, args: list[str] | None = None) -> ParseResult:
        """
        Bind tokens to the registered options and arguments.

        Args:
            args (list[str]): The CLI-style token list.

        Returns:
            ParseResult: Resolved inputs in declaration order.

        Raises:
            CommandArgumentError: On unrecognized options, missing or unexpected
                option values, or surplus positional tokens.
            HelpSignal: After rendering help.
            VersionSignal: After rendering the version.
        """
        if args is None:
            args = []

        result = ParseResult()
        option_values: dict[str, list[str]] = {
            option.template: [] for option in self._options
        }
        positional: list[str] = []
        options_ended = False

        i = 0
        while i < len(args):
            token = args[i]
            i += 1
            if options_ended or not token.startswith("-") or token == "-":
                if len(positional) >= len(self._arguments):
                    raise CommandArgumentError(
                        f"Unrecognized command or argument '{token}'"
                    )
                positional.append(token)
                continue
            if token == "--":
                options_ended = True
                continue

            flag, inline_value = self._split_token(token)
            if flag in self._reserved:
                self._handle_reserved(self._reserved[flag], result)
                continue

            option = self._flag_map.get(flag)
            if option is None:
                raise CommandArgumentError(f"Unrecognized option '{token}'")
            values = option_values[option.template]

            if option.option_type == OptionType.NO_VALUE:
                if inline_value is not None or values:
                    shown = inline_value if inline_value is not None else NO_VALUE_TOKEN
                    raise CommandArgumentError(
                        f"Unexpected value '{shown}' for option '{option.name}'"
                    )
                values.append(NO_VALUE_TOKEN)
                continue

            if inline_value is None:
                if i >= len(args):
                    raise CommandArgumentError(
                        f"Missing value for option '{option.name}'"
                    )
                inline_value = args[i]
                i += 1
            if option.option_type == OptionType.SINGLE_VALUE and values:
                raise CommandArgumentError(
                    f"Unexpected value '{inline_value}' for option '{option.name}'"
                )
            values.append(inline_value)

        result.options = [
            ResolvedInput(option, option_values[option.template])
            for option in self._options
        ]
        result.arguments = [
            ResolvedInput(argument, [positional[j]] if j < len(positional) else [])
            for j, argument in enumerate(self._arguments)
        ]
        logger.debug(
            "Parsed %d token(s) for '%s': %d positional", len(args), self.name, len(positional)
        )
        return result

    def get_usage(self) -> str:
        usage = f"Usage: {self.name}"
        if self._commands:
            usage += " [command]"
        if self._arguments:
            usage += " [arguments]"
        if self._options or self._reserved:
            usage += " [options]"
        return usage

    def _badge(self, text: str, style: str) -> str:
        if not text:
            return ""
        return f"[{style}]{escape(text)}[/{style}]"

    def render_help(self) -> None:
        """
        Print formatted help text using Rich output.

        Includes title and version, usage, commands, arguments, options and the
        bottom help text.
        """
        heading = f"[bold]{escape(self.title or self.name)}[/bold]"
        if self.version:
            heading += f" [bright_black]{escape(self.version)}[/bright_black]"
        self.console.print(heading)
        self.console.print()
        self.console.print(escape(self.get_usage()))

        if self._commands:
            width = max(len(name) for name, _ in self._commands)
            self.console.print()
            self.console.print("Commands:")
            for name, help in self._commands:
                self.console.print(f"  {escape(name):<{width}}  {escape(help)}")

        if self._arguments:
            width = max(len(argument.name) for argument in self._arguments)
            self.console.print()
            self.console.print("Arguments:")
            for argument in self._arguments:
                badge = self._badge("*" if argument.required else "", "red")
                self.console.print(
                    f"  {escape(argument.name):<{width}}  "
                    f"{escape(argument.description)}{badge}"
                )

        rows = [
            (option.template, option.description, option.option_type.badge)
            for option in self._options
        ]
        rows.extend((flags, help, "") for flags, help in self._reserved_help)
        if rows:
            width = max(len(flags) for flags, _, _ in rows)
            self.console.print()
            self.console.print("Options:")
            for flags, description, badge in rows:
                self.console.print(
                    f"  {escape(flags):<{width}}  "
                    f"{escape(description)}{self._badge(badge, 'cyan')}"
                )

        if self.bottom_help_text:
            self.console.print()
            self.console.print(escape(self.bottom_help_text), style="dim")

    def render_version(self) -> None:
        self.console.print(self.version or "")

    def render_listing(self, result: ParseResult) -> None:
        """Print resolved options and arguments, one per line."""
        self.console.print("Options:")
        for option in result.options:
            self.console.print(f"  {escape(str(option))}")
        self.console.print()
        self.console.print("Arguments:")
        for argument in result.arguments:
            self.console.print(f"  {escape(str(argument))}")

    def __str__(self) -> str:
        return (
            f"CommandLineParser(name='{self.name}', options={len(self._options)}, "
            f"arguments={len(self._arguments)}, reserved={len(self._reserved)})"
        )

    def __repr__(self) -> str:
        return str(self)
