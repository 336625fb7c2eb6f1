from pathlib import Path

import pytest

from commandkit.command import Command
from commandkit.config import (
    RawSignature,
    find_config,
    import_action,
    load_command,
    load_signature,
)
from commandkit.cowsay import COWSAY_SIGNATURE, cowsay
from commandkit.exceptions import ConfigError, SchemaConflictError

COWSAY_YAML = """\
name: cowsay
help: Generates ASCII picture of a cow with a message.
action: commandkit.cowsay.cowsay
signature:
  arguments:
    - {name: message, help: What the cow says.}
  options:
    - {name: eyes, short: e, help: Change the cow's eyes.}
    - {name: tongue, short: t, help: Change the cow's tongue.}
  flags:
    - {name: dead, short: d, help: Draw a dead cow.}
"""

COWSAY_TOML = """\
name = "cowsay"
help = "Generates ASCII picture of a cow with a message."
action = "commandkit.cowsay.cowsay"

[[signature.arguments]]
name = "message"
help = "What the cow says."

[[signature.options]]
name = "eyes"
short = "e"
help = "Change the cow's eyes."

[[signature.options]]
name = "tongue"
short = "t"
help = "Change the cow's tongue."

[[signature.flags]]
name = "dead"
short = "d"
help = "Draw a dead cow."
"""


@pytest.fixture(autouse=True)
def fake_home(monkeypatch, tmp_path):
    """Redirect Path.home() and the cwd to temporary directories."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    monkeypatch.delenv("COMMANDKIT_CONFIG", raising=False)
    return home


def test_load_command_yaml(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text(COWSAY_YAML)
    command = load_command(path)
    assert isinstance(command, Command)
    assert command.name == "cowsay"
    assert command.help_text == "Generates ASCII picture of a cow with a message."
    assert command.action is cowsay
    assert command.signature == COWSAY_SIGNATURE


def test_load_command_toml(tmp_path):
    path = tmp_path / "cowsay.toml"
    path.write_text(COWSAY_TOML)
    assert load_command(str(path)).signature == COWSAY_SIGNATURE


def test_load_signature_top_level(tmp_path):
    path = tmp_path / "signature.yml"
    path.write_text("arguments:\n  - name: path\n    optional: true\nflags:\n  - name: all\n")
    signature = load_signature(path)
    assert [a.name for a in signature.arguments] == ["path"]
    assert signature.arguments[0].optional is True
    assert [f.name for f in signature.flags] == ["all"]
    assert signature.options == ()


def test_load_signature_section(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text(COWSAY_YAML)
    assert load_signature(path) == COWSAY_SIGNATURE


def test_signature_definition_round_trip():
    definition = COWSAY_SIGNATURE.to_definition()
    assert RawSignature.model_validate(definition).to_signature() == COWSAY_SIGNATURE


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="No such config file"):
        load_signature(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "cowsay.json"
    path.write_text("{}")
    with pytest.raises(ConfigError, match="Unsupported config format"):
        load_signature(path)


def test_not_a_mapping(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_signature(path)


def test_unparsable_yaml(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text("arguments: [unclosed\n")
    with pytest.raises(ConfigError, match="Could not parse"):
        load_signature(path)


def test_invalid_short_alias(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text("options:\n  - name: eyes\n    short: ey\n")
    with pytest.raises(ConfigError, match="Invalid signature"):
        load_signature(path)


def test_conflicts_propagate(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text("arguments:\n  - name: eyes\noptions:\n  - name: eyes\n")
    with pytest.raises(SchemaConflictError):
        load_signature(path)


def test_command_requires_action(tmp_path):
    path = tmp_path / "cowsay.yaml"
    path.write_text("name: cowsay\n")
    with pytest.raises(ConfigError, match="Invalid command"):
        load_command(path)


def test_import_action():
    assert import_action("commandkit.cowsay.cowsay") is cowsay


@pytest.mark.parametrize(
    "dotted_path,message",
    [
        ("cowsay", "Invalid action path"),
        ("commandkit.nope.cowsay", "Could not import"),
        ("commandkit.cowsay.nope", "has no attribute"),
        ("commandkit.cowsay.COWSAY_SIGNATURE", "is not callable"),
    ],
)
def test_import_action_errors(dotted_path, message):
    with pytest.raises(ConfigError, match=message):
        import_action(dotted_path)


def test_find_config_none():
    assert find_config() is None


def test_find_config_in_cwd():
    path = Path.cwd() / "commandkit.yaml"
    path.write_text(COWSAY_YAML)
    assert find_config() == path


def test_find_config_cwd_wins_over_home(fake_home):
    global_dir = fake_home / ".config" / "commandkit"
    global_dir.mkdir(parents=True)
    (global_dir / "commandkit.toml").write_text(COWSAY_TOML)
    assert find_config() == global_dir / "commandkit.toml"

    local = Path.cwd() / ".commandkit.toml"
    local.write_text(COWSAY_TOML)
    assert find_config() == local


def test_find_config_from_env(monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(COWSAY_YAML)
    monkeypatch.setenv("COMMANDKIT_CONFIG", str(path))
    assert find_config() == path
