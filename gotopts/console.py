# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""Rich console construction for gotopts help and listing output."""
from typing import TextIO

from rich.console import Console


def make_console(file: TextIO, use_ansi_colors: bool = True) -> Console:
    """
    Build a rich `Console` that writes to `file`.

    Colors are emitted only when `use_ansi_colors` is true and the stream is a
    terminal. Text is never wrapped or highlighted so help output stays literal
    when captured.
    """
    return Console(
        file=file,
        color_system="auto" if use_ansi_colors else None,
        no_color=not use_ansi_colors,
        highlight=False,
        soft_wrap=True,
        emoji=False,
    )
