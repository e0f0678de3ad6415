# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterable, TypeVar

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

T = TypeVar("T")
R = TypeVar("R")


def select_not_none(items: Iterable[T], selector: Callable[[T], R | None]) -> list[R]:
    """Return the results of `selector` over `items` that are not None."""
    results = []
    for item in list(items):
        result = selector(item)
        if result is not None:
            results.append(result)
    return results


def equal_to_any(target: Any, *values: Any) -> bool:
    """Return True if `target` is not None and equals one of `values`."""
    if target is None:
        return False
    return any(target == value for value in values)


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def _level_from_env(default: int) -> int:
    level = os.getenv("GOTOPTS_LOG_LEVEL")
    if not level:
        return default
    if level.isdigit():
        return int(level)
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    raise ValueError(f"Invalid log level: {level}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for gotopts with support for both CLI-friendly and
    structured JSON output.

    Console logging always goes to standard error: standard output carries the
    machine-readable data consumed by the calling shell script.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `GOTOPTS_LOG_MODE` environment
            variable or fallback based on container detection.
        log_filename (str | None):
            Optional path to a log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`,
            overridable with the `GOTOPTS_LOG_LEVEL` environment variable.

    Raises:
        ValueError: If an invalid logging `mode` or level is passed.
    """
    if not mode:
        mode = os.getenv("GOTOPTS_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_log_level = _level_from_env(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("gotopts")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
