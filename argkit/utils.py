# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from argkit.console import error_console

LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"

_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_name(path: str | None = None) -> str:
    """
    Return the basename of a program path.

    Both `/` and `\\` are treated as separators so Windows style paths render
    the same on every platform. Defaults to `sys.argv[0]`.
    """
    if path is None:
        path = sys.argv[0] if sys.argv and sys.argv[0] else "program"
    name = re.split(r"[\\/]", path)[-1]
    return name or path


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in _CONTAINER_MARKERS)


def resolve_log_level(level: int | str, default: int = logging.WARNING) -> int:
    """Turn a level number or name such as "info" into a number, else `default`."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else default


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int | str = logging.WARNING,
):
    """
    Install root handlers for a program built on argkit.

    argkit itself only logs to the "argkit" logger; entry points call this once.
    The console handler writes to stderr, either through Rich (`cli`) or as JSON
    lines (`json`). `mode` falls back to `ARGKIT_LOG_MODE`, then to `json` inside
    a container and `cli` elsewhere. An unknown `console_log_level` name falls
    back to WARNING. A file handler is added only when `log_filename` is set.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`.
    """
    if not mode:
        mode = os.getenv("ARGKIT_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    console_handler.setLevel(resolve_log_level(console_log_level))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            formatter: logging.Formatter = pythonjsonlogger.json.JsonFormatter(
                JSON_LOG_FORMAT
            )
        else:
            formatter = logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("argkit").debug("Logging initialized in '%s' mode.", mode)
