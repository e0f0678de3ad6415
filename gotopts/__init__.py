"""
GotOpts

Copyright (c) 2025 Spencer James.
Licensed under the MIT License. See LICENSE file for details.
"""

from .gotopts_cli import GotOptsCli
from .logger import logger
from .settings import ToolSettings
from .shell_script import ShellScriptCli
from .tool import Command, CommandLineTool

__all__ = [
    "Command",
    "CommandLineTool",
    "GotOptsCli",
    "ShellScriptCli",
    "ToolSettings",
    "logger",
]
