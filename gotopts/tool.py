# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines `CommandLineTool`, the base class of gotopts command line tools, and
`Command`, a sub-command record.

A tool is configured with `ToolSettings`, parses its command line with a
`CommandLineParser`, checks that every resolved input is valid and then calls
`execute()`. All failures are reported on the tool's error stream and turned
into exit code 1; nothing escapes `run()`.

Two shapes are supported:
- Top-level execution: override `create_options_and_arguments()` (or pass them
  in settings) and `execute()`.
- Sub-commands: override `add_commands()` and register `Command` objects with
  `add_command()`. The first token selects the command.

Exit codes:
- 0: executed successfully, or help/version/listing shown
- 1: help shown because no tokens were given, usage error, invalid inputs,
  or an unhandled exception
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

from gotopts.console import make_console
from gotopts.exceptions import CommandArgumentError
from gotopts.logger import logger
from gotopts.parser.command_line_parser import CommandLineParser, ParseResult
from gotopts.parser.declaration import Argument, Option
from gotopts.parser.resolved import ResolvedInput
from gotopts.parser.validation import is_valid
from gotopts.settings import ToolSettings
from gotopts.signals import FlowSignal

CommandExecute = Callable[[str, list[ResolvedInput], list[ResolvedInput]], int]


@dataclass
class Command:
    """
    A sub-command of a `CommandLineTool`.

    Attributes:
        name (str): Token that selects the command.
        title (str): Title shown at the top of the command's help.
        top_level_help_text (str): Summary shown in the tool's help.
        execute (CommandExecute): Called with `(name, options, arguments)`.
        options (list[Option]): Command options.
        arguments (list[Argument]): Command arguments.
        bottom_help_text (str | None): Text shown at the bottom of the command's help.
    """

    name: str
    title: str
    top_level_help_text: str
    execute: CommandExecute = lambda name, options, arguments: 0
    options: list[Option] = field(default_factory=list)
    arguments: list[Argument] = field(default_factory=list)
    bottom_help_text: str | None = None


class CommandLineTool:
    """
    Base class for command line tools.

    Subclasses override `execute()` for top-level execution and read their
    parsed inputs through `options`, `arguments` and `get_inputs()`.
    """

    def __init__(self, settings: ToolSettings) -> None:
        if not settings.name or not settings.name.strip():
            raise ValueError("Tool name is required.")
        if not settings.title or not settings.title.strip():
            raise ValueError("Tool title is required.")
        self.settings: ToolSettings = settings
        self._commands: dict[str, Command] = {}
        self._result: ParseResult = ParseResult()
        self._initialized: bool = False

    @property
    def out(self) -> TextIO:
        """For writing to standard output."""
        return self.settings.out_stream

    @property
    def err(self) -> TextIO:
        """For writing to standard error."""
        return self.settings.err_stream

    @property
    def options(self) -> list[ResolvedInput]:
        """Resolved top-level options of the current run."""
        return list(self._result.options)

    @property
    def arguments(self) -> list[ResolvedInput]:
        """Resolved top-level arguments of the current run."""
        return list(self._result.arguments)

    @property
    def result(self) -> ParseResult:
        return self._result

    def create_options_and_arguments(self) -> tuple[list[Option], list[Argument]]:
        """Override to declare top-level options and arguments."""
        return self.settings.options, self.settings.arguments

    def add_commands(self) -> None:
        """Override to register sub-commands with `add_command()`."""

    def add_command(self, command: Command) -> None:
        if command.name in self._commands:
            raise CommandArgumentError(f"Command '{command.name}' is already defined")
        self._commands[command.name] = command

    def execute(self) -> int:
        """Override to implement top-level execution. Returns the exit code."""
        return 0

    def get_inputs(
        self,
        option_predicate: Callable[[ResolvedInput], bool] | None = None,
        argument_predicate: Callable[[ResolvedInput], bool] | None = None,
    ) -> list[ResolvedInput]:
        """
        Return resolved options followed by resolved arguments, optionally
        filtered by the given predicates.
        """
        options = [
            option
            for option in self.options
            if option_predicate is None or option_predicate(option)
        ]
        arguments = [
            argument
            for argument in self.arguments
            if argument_predicate is None or argument_predicate(argument)
        ]
        return [*options, *arguments]

    def _make_parser(
        self,
        name: str,
        title: str,
        options: Sequence[Option],
        arguments: Sequence[Argument],
        bottom_help_text: str | None,
    ) -> CommandLineParser:
        parser = CommandLineParser(
            name,
            title,
            version=self.settings.version,
            bottom_help_text=bottom_help_text,
            help_option_template=self.settings.help_option_template,
            options_and_arguments_option=self.settings.options_and_arguments_option,
            use_ansi_colors=self.settings.use_ansi_colors,
            console=make_console(self.out, self.settings.use_ansi_colors),
        )
        parser.add_options(options)
        parser.add_arguments(arguments)
        return parser

    def _build_parser(self) -> CommandLineParser:
        if not self._initialized:
            self.add_commands()
            self._initialized = True
        options, arguments = self.create_options_and_arguments()
        parser = self._make_parser(
            self.settings.name,
            self.settings.title,
            options,
            arguments,
            self.settings.bottom_help_text,
        )
        for command in self._commands.values():
            parser.add_command_summary(command.name, command.top_level_help_text)
        return parser

    def can_execute(
        self, options: Sequence[ResolvedInput], arguments: Sequence[ResolvedInput]
    ) -> bool:
        """
        Check basic validity of all inputs, reporting failures on the error stream.
        """
        can_execute = True

        if any(not is_valid(option) for option in options):
            can_execute = False
            self.err.write("Invalid option(s). ")

        if any(not is_valid(argument) for argument in arguments):
            can_execute = False
            self.err.write("Missing or invalid argument(s). ")

        help_template = self.settings.help_option_template
        if not can_execute and help_template and help_template.strip():
            self.err.write(f"Use {help_template} for more information.\n")
        elif not can_execute:
            self.err.write("\n")

        return can_execute

    def _report(self, error: Exception) -> int:
        logger.debug("'%s' failed: %r", self.settings.name, error)
        self.err.write(f"{type(error).__name__}: {error}\n")
        return 1

    def run(self, args: Sequence[str]) -> int:
        """
        Run the tool with the given tokens.

        Returns:
            int: Exit code.
        """
        args = list(args)
        try:
            parser = self._build_parser()

            if not args and self.settings.show_help_on_no_arguments:
                parser.render_help()
                return 1

            if self._commands:
                return self._run_command(parser, args)

            result = parser.parse_args(args)
            if not self.can_execute(result.options, result.arguments):
                return 1

            if result.show_options_and_arguments:
                parser.render_listing(result)
                return 0

            self._result = result
            return self.execute()
        except FlowSignal:
            return 0
        except CommandArgumentError as error:
            logger.debug("Usage error in '%s': %s", self.settings.name, error)
            self.err.write(f"{error}\n")
            return 1
        except Exception as error:
            return self._report(error)

    def _run_command(self, parser: CommandLineParser, args: list[str]) -> int:
        command = self._commands.get(args[0]) if args else None
        if command is None:
            parser.parse_args(args)
            parser.render_help()
            return 1

        command_parser = self._make_parser(
            f"{self.settings.name} {command.name}",
            command.title,
            command.options,
            command.arguments,
            command.bottom_help_text,
        )
        result = command_parser.parse_args(args[1:])
        if not self.can_execute(result.options, result.arguments):
            return 1

        if result.show_options_and_arguments:
            command_parser.render_listing(result)
            return 0

        self._result = result
        try:
            return command.execute(command.name, result.options, result.arguments)
        except Exception as error:
            return self._report(error)
