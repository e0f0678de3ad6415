# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines `GotOptsCli`, the `gotopts` command.

A shell script calls gotopts with its name, title and its own command line
wrapped in box brackets, plus mini-language declarations of its options (`-o`)
and arguments (`-a`):

    eval "$(gotopts -v 1.0 -p my \\
        -a 'path;Path to use;f:d' \\
        -o '-f,--force;Force it' \\
        myscript 'Does my things' "[$(IFS='|'; echo "$*")]")" || exit 1

gotopts builds a `ShellScriptCli` from the declarations, runs it against the
script's tokens and re-emits its output:
- data (a bracketed blob) is unwrapped and printed one `name="value"` line at a
  time, each name prefixed with `<prefix>_` when `-p` is given, exit code 0;
- anything else (help, usage errors, check failures) is printed unchanged with
  a non-zero exit code.
"""
from __future__ import annotations

import io
from typing import TextIO

from gotopts.logger import logger
from gotopts.output import (
    DEFAULT_ARGUMENTS_DELIMITER,
    is_wrapped,
    split_arguments,
    unwrap_output,
)
from gotopts.parser.declaration import DEFAULT_CAN_BE_EMPTY, DEFAULT_REQUIRED, Argument, Option
from gotopts.parser.decoder import decode_arguments, decode_options
from gotopts.parser.input_type import OptionType
from gotopts.settings import ToolSettings
from gotopts.shell_script import ShellScriptCli
from gotopts.tool import CommandLineTool
from gotopts.version import __version__

BOTTOM_HELP_TEXT = "".join(
    [
        "Option (-o) and Argument (-a) Patterns:\n",
        "  Option    'template;description(;o:optionType)?(;f:func)?(;t:type)?(;d:default)?'\n",
        "  Argument  'name;description(;r:required)?(;e:canBeEmpty)?(;f:func)?(;t:type)?(;d:default)?'\n",
        "\n  Defaults:\n",
        "    Option    optionType=no-value(off|on), type=string, default=null\n",
        f"    Argument  required={str(DEFAULT_REQUIRED).lower()}, "
        f"canBeEmpty={str(DEFAULT_CAN_BE_EMPTY).lower()}, type=string, default=null\n",
        "\n  Value types:\n",
        "    default              String\n",
        "    type                 Option/Argument value type: number=n, string=s\n",
        "    required|canBeEmpty  Boolean: true=1|t, false=0|f\n",
        "    optionType           Option value type: multiple-values=m, no-value(off|on)=n, single-value=s\n",
        "\n  Functions (f):\n",
        "    d|!d                 Directory must (not) exist\n",
        "    f|!f                 File must (not) exist\n",
    ]
)


class GotOptsCli(CommandLineTool):
    """Parses shell script command line options and arguments."""

    def __init__(self, settings: ToolSettings | None = None) -> None:
        super().__init__(settings or self.default_settings())

    @staticmethod
    def default_settings(
        out: TextIO | None = None, err: TextIO | None = None
    ) -> ToolSettings:
        """Return a fresh copy of the settings gotopts runs with by default."""
        return ToolSettings(
            "gotopts",
            "Parse Shell Script Command Line Options and Arguments",
            bottom_help_text=BOTTOM_HELP_TEXT,
            use_ansi_colors=False,
            version=__version__,
            out=out,
            err=err,
        )

    def create_options_and_arguments(self) -> tuple[list[Option], list[Argument]]:
        return (
            [
                Option("-a", "Script argument", OptionType.MULTIPLE_VALUE),
                Option("-b", "Script bottom help text", OptionType.SINGLE_VALUE),
                Option(
                    "-d",
                    "Script arguments delimiter",
                    OptionType.SINGLE_VALUE,
                    default_value=DEFAULT_ARGUMENTS_DELIMITER,
                ),
                Option("-h", "Script help", OptionType.NO_VALUE),
                Option("-o", "Script option", OptionType.MULTIPLE_VALUE),
                Option("-p", "Script argument prefix", OptionType.SINGLE_VALUE),
                Option("-v", "Script version", OptionType.SINGLE_VALUE),
            ],
            [
                Argument("name", "Script name"),
                Argument("title", "Script title"),
                Argument(
                    "args",
                    "Script provided arguments encapsulated in box brackets ([]) "
                    "and delimited with pipes (|)",
                    can_be_empty=True,
                ),
            ],
        )

    def build_script_settings(self, stream: TextIO) -> ToolSettings:
        """Build the `ShellScriptCli` settings from this run's inputs."""
        result = self.result
        settings = ToolSettings(
            str(result.get_argument("name").value()),
            str(result.get_argument("title").value()),
            use_ansi_colors=False,
            out=stream,
            err=stream,
        )

        bottom_help_text = result.get_option("b").value_text()
        if bottom_help_text is not None:
            settings.bottom_help_text = bottom_help_text
        version = result.get_option("v").value_text()
        if version is not None:
            settings.version = version

        settings.arguments.extend(decode_arguments(result.get_option("a").values_text()))
        settings.options.extend(decode_options(result.get_option("o").values_text()))
        return settings

    def script_arguments(self, help_template: str | None) -> list[str] | None:
        """
        Tokens forwarded to the script, or None if the `args` blob is malformed.
        """
        result = self.result
        tokens: list[str] = []
        if result.get_option("h").given and help_template:
            tokens.append(help_template)

        blob = str(result.get_argument("args").value())
        delimiter = result.get_option("d").value_text()
        if delimiter is None:
            delimiter = DEFAULT_ARGUMENTS_DELIMITER
        if blob and not is_wrapped(blob):
            return None
        tokens.extend(split_arguments(blob, delimiter))
        return tokens

    def execute(self) -> int:
        with io.StringIO() as captured:
            settings = self.build_script_settings(captured)

            tokens = self.script_arguments(settings.help_option_template)
            if tokens is None:
                self.err.write("Invalid arguments provided to script.\n")
                return 1

            exit_code = ShellScriptCli(settings).run(tokens)
            text = captured.getvalue()

        logger.debug("'%s' exited with %d", settings.name, exit_code)
        if exit_code != 0:
            self.out.write(text)
            return exit_code

        if not is_wrapped(text):
            self.out.write(text)
            return 1

        prefix = self.result.get_option("p").value_text()
        for line in unwrap_output(text, prefix):
            self.out.write(f"{line}\n")
        return 0
