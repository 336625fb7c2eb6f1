# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from commandkit.console import console


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        if script.endswith("__main__.py"):
            return "python -m commandkit"
        return f"python {script}"
    return script


_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container() -> bool:
    """Guess from PID 1's cgroup whether we run inside a container."""
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in _CONTAINER_MARKERS)


def _default_log_mode() -> str:
    return os.getenv("COMMANDKIT_LOG_MODE") or (
        "json" if running_in_container() else "cli"
    )


def _make_formatter(mode: str) -> logging.Formatter:
    if mode == "json":
        return pythonjsonlogger.json.JsonFormatter(_JSON_FORMAT)
    return logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def _make_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=console,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(_make_formatter(mode))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    console_log_level: int = logging.WARNING,
    file_log_level: int = logging.DEBUG,
) -> None:
    """
    Configure the root logger for CommandKit.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for one JSON
            object per record. Defaults to `COMMANDKIT_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere. The log file uses the same
            format family.
        log_filename (str | None): Append records to this file when given.
        console_log_level (int): Threshold of the console handler.
        file_log_level (int): Threshold of the file handler.

    The `commandkit` logger is set to the lowest active threshold, so the
    matcher's per-token debug records are only built when a handler wants them.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or _default_log_mode()
    handlers = [_make_console_handler(mode)]
    handlers[0].setLevel(console_log_level)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(_make_formatter(mode))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    for handler in handlers:
        root.addHandler(handler)

    package_logger = logging.getLogger("commandkit")
    package_logger.setLevel(min(handler.level for handler in handlers))
    package_logger.propagate = True
    package_logger.debug("Logging initialized in '%s' mode.", mode)
