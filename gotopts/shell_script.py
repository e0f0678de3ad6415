# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""
Defines `ShellScriptCli`, the tool that parses a shell script's own command line
on behalf of `GotOptsCli`.

Its options and arguments come from `ToolSettings`, usually decoded from the
declaration mini-language. After basic validation, inputs tagged with a
post-parse check (see `gotopts.parser.validation`) are checked; any failure
aborts the run with one line per failing input on the error stream:

    <tool-name>: <argument|option> <input-name>: <failure-detail>

On success the inputs are written to the output stream as a bracketed blob (see
`gotopts.output`). Options are included only when given on the command line.
"""
from __future__ import annotations

from gotopts.logger import logger
from gotopts.output import encode_inputs
from gotopts.parser.validation import run_check
from gotopts.tool import CommandLineTool
from gotopts.utils import select_not_none


class ShellScriptCli(CommandLineTool):
    """Shell script command line interface. For use by `GotOptsCli`."""

    def execute(self) -> int:
        inputs = self.get_inputs(option_predicate=lambda option: option.given)

        failures = select_not_none(inputs, run_check)
        if failures:
            logger.debug("%d input(s) of '%s' failed checks", len(failures), self.settings.name)
            for failure in failures:
                self.err.write(f"{self.settings.name}: {failure}\n")
            return 1

        self.out.write(encode_inputs(inputs))
        return 0
