import logging
import sys
from pathlib import Path

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from commandkit.utils import get_program_invocation, running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_loggers():
    root = logging.getLogger()
    package_logger = logging.getLogger("commandkit")
    handlers = list(root.handlers)
    level = root.level
    package_level = package_logger.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    package_logger.setLevel(package_level)


def test_setup_logging_cli():
    setup_logging(mode="cli", console_log_level=logging.INFO)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].level == logging.INFO
    assert logging.getLogger("commandkit").level == logging.INFO


def test_setup_logging_json():
    setup_logging(mode="json")
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.WARNING
    assert logging.getLogger("commandkit").level == logging.WARNING


def test_setup_logging_mode_from_env(monkeypatch):
    monkeypatch.setenv("COMMANDKIT_LOG_MODE", "json")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


@pytest.mark.parametrize("mode,json_file", [("cli", False), ("json", True)])
def test_setup_logging_file_handler(tmp_path, mode, json_file):
    log_file = tmp_path / "commandkit.log"
    setup_logging(mode=mode, log_filename=str(log_file))
    file_handlers = [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    assert isinstance(file_handlers[0].formatter, JsonFormatter) is json_file
    assert logging.getLogger("commandkit").level == logging.DEBUG
    logging.getLogger("commandkit").debug("hello from the tests")
    file_handlers[0].flush()
    assert "hello from the tests" in log_file.read_text()


def test_setup_logging_without_file():
    setup_logging(mode="cli")
    assert not any(
        isinstance(handler, logging.FileHandler)
        for handler in logging.getLogger().handlers
    )


def test_get_program_invocation_module(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/tmp/site-packages/commandkit/__main__.py"])
    monkeypatch.setattr(sys, "executable", "/usr/bin/python3")
    monkeypatch.setattr("commandkit.utils.shutil.which", lambda _: None)
    assert get_program_invocation() == "python -m commandkit"


def test_get_program_invocation_script(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["greet.py"])
    monkeypatch.setattr(sys, "executable", "/usr/bin/python3")
    monkeypatch.setattr("commandkit.utils.shutil.which", lambda _: None)
    assert get_program_invocation() == "python greet.py"


def test_get_program_invocation_installed(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["commandkit"])
    monkeypatch.setattr(
        "commandkit.utils.shutil.which", lambda _: "/usr/local/bin/commandkit"
    )
    assert get_program_invocation() == "commandkit"


def test_running_in_container_without_cgroup(monkeypatch):
    def raise_oserror(self, *args, **kwargs):
        raise OSError("no cgroup")

    monkeypatch.setattr(Path, "read_text", raise_oserror)
    assert running_in_container() is False


@pytest.mark.parametrize(
    "cgroup,expected",
    [("0::/kubepods/besteffort/pod1\n", True), ("0::/init.scope\n", False)],
)
def test_running_in_container_markers(monkeypatch, cgroup, expected):
    monkeypatch.setattr(Path, "read_text", lambda self, *args, **kwargs: cgroup)
    assert running_in_container() is expected
