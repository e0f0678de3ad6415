# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Tool settings.

`ToolSettings` is the configuration value handed to a `CommandLineTool` at
construction. It carries the tool's identity, help text, declared options and
arguments, behavior switches and the output and error streams. Nothing here is
process-global: each tool owns its settings.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from gotopts.parser.declaration import Argument, Option


@dataclass
class ToolSettings:
    """
    Settings for a command line tool.

    Attributes:
        name (str): Tool name, used in usage and error messages.
        title (str): Tool title shown at the top of help.
        options (list[Option]): Top-level options.
        arguments (list[Argument]): Top-level arguments.
        bottom_help_text (str | None): Text shown at the bottom of help.
        help_option_template (str | None): Help flags. None disables the help option.
        options_and_arguments_option (bool): Add `--opts-args` to list inputs and exit.
        show_help_on_no_arguments (bool): Show help (exit 1) when run with no tokens.
        use_ansi_colors (bool): Style help output.
        version (str | None): Tool version; enables `--version`.
        out (TextIO | None): Output stream. Standard output when None.
        err (TextIO | None): Error stream. Standard error when None.
    """

    name: str
    title: str
    options: list[Option] = field(default_factory=list)
    arguments: list[Argument] = field(default_factory=list)
    bottom_help_text: str | None = None
    help_option_template: str | None = "--help"
    options_and_arguments_option: bool = False
    show_help_on_no_arguments: bool = True
    use_ansi_colors: bool = True
    version: str | None = None
    out: TextIO | None = None
    err: TextIO | None = None

    @property
    def out_stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self.err if self.err is not None else sys.stderr
