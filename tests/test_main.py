import sys
from pathlib import Path

import pytest

from commandkit.__main__ import bootstrap, main
from commandkit.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INVALID_USAGE, EXIT_SUCCESS

GREET_MODULE = """\
def greet(context, result):
    context.console.emit(f"Hello, {result['name']}!")
"""

GREET_YAML = """\
name: greet
action: greet_action.greet
signature:
  arguments:
    - name: name
"""


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run every test from an empty directory with a temporary home."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    monkeypatch.delenv("COMMANDKIT_CONFIG", raising=False)
    monkeypatch.setenv("COMMANDKIT_LOG_MODE", "cli")
    monkeypatch.setattr("commandkit.__main__.setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "path", list(sys.path))
    yield work
    sys.modules.pop("greet_action", None)


def test_bootstrap_without_config():
    assert bootstrap() is None


def test_bootstrap_adds_config_dir(isolated):
    config_file = isolated / "commandkit.yaml"
    config_file.write_text(GREET_YAML)
    assert bootstrap() == config_file
    assert str(isolated) in sys.path


def test_main_runs_cowsay_by_default(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["commandkit", "Moo", "--dead"])
    assert main() == EXIT_SUCCESS
    output = capsys.readouterr().out
    assert "< Moo >" in output
    assert "(xx\\_______" in output


def test_main_reports_parse_errors(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["commandkit", "--nope"])
    assert main() == EXIT_INVALID_USAGE
    assert "Unrecognized option '--nope'" in capsys.readouterr().out


def test_main_runs_configured_command(isolated, monkeypatch, capsys):
    (isolated / "greet_action.py").write_text(GREET_MODULE)
    (isolated / "commandkit.yaml").write_text(GREET_YAML)
    monkeypatch.setattr(sys, "argv", ["commandkit", "Ada"])
    assert main() == EXIT_SUCCESS
    assert "Hello, Ada!" in capsys.readouterr().out


def test_main_invalid_config(isolated, monkeypatch):
    (isolated / "commandkit.yaml").write_text("name: broken\n")
    monkeypatch.setattr(sys, "argv", ["commandkit"])
    assert main() == EXIT_GENERIC_FAILURE
