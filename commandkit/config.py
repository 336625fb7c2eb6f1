# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for CommandKit signatures and commands.

Signatures can be declared in YAML or TOML instead of Python:

    name: cowsay
    help: Generates ASCII picture of a cow with a message.
    action: my_module.cowsay
    signature:
      arguments:
        - {name: message, help: What the cow says}
      options:
        - {name: eyes, short: e, help: Change the eyes}
      flags:
        - {name: dead, short: d, help: Dead cow}

Files are validated with pydantic before any `Signature` is built, so schema
mistakes surface as `ConfigError` and name collisions as `SchemaConflictError`.
"""
from __future__ import annotations

import importlib
import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from commandkit.command import Command
from commandkit.exceptions import ConfigError
from commandkit.logger import logger
from commandkit.parser.argument import Argument, Flag, Option
from commandkit.parser.signature import Signature


class RawArgument(BaseModel):
    """Positional argument entry in a configuration file."""

    name: str
    help: str = ""
    optional: bool = False


class RawNamed(BaseModel):
    name: str
    short: str | None = None
    help: str = ""

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short must be a single character")
        return value


class RawOption(RawNamed):
    """Option entry in a configuration file."""


class RawFlag(RawNamed):
    """Flag entry in a configuration file."""


class RawSignature(BaseModel):
    """Signature section of a configuration file."""

    arguments: list[RawArgument] = Field(default_factory=list)
    options: list[RawOption] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)

    def to_signature(self) -> Signature:
        descriptors: list[Argument | Option | Flag] = [
            Argument(name=raw.name, help=raw.help, optional=raw.optional)
            for raw in self.arguments
        ]
        descriptors += [
            Option(name=raw.name, short=raw.short, help=raw.help) for raw in self.options
        ]
        descriptors += [
            Flag(name=raw.name, short=raw.short, help=raw.help) for raw in self.flags
        ]
        return Signature(descriptors)


class RawCommand(BaseModel):
    """Command configuration: a signature plus a dotted path to its action."""

    name: str
    action: str
    help: str = ""
    signature: RawSignature = Field(default_factory=RawSignature)

    def to_command(self) -> Command:
        return Command(
            name=self.name,
            signature=self.signature.to_signature(),
            action=import_action(self.action),
            help_text=self.help,
        )


def import_action(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid action path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. "
            "Ensure the module is installed and discoverable via PYTHONPATH."
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(action):
        raise ConfigError(f"'{dotted_path}' is not callable")
    return action


def find_config() -> Path | None:
    """Return the first existing CommandKit configuration file, if any."""
    candidates = [
        Path.cwd() / "commandkit.yaml",
        Path.cwd() / "commandkit.toml",
        Path.cwd() / ".commandkit.yaml",
        Path.cwd() / ".commandkit.toml",
    ]
    if os.environ.get("COMMANDKIT_CONFIG"):
        candidates.append(Path(os.environ["COMMANDKIT_CONFIG"]))
    candidates += [
        Path.home() / ".config" / "commandkit" / "commandkit.yaml",
        Path.home() / ".config" / "commandkit" / "commandkit.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def _read_config(file_path: Path | str) -> dict[str, Any]:
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "name: cowsay\n"
            "action: my_module.cowsay\n"
            "signature:\n"
            "  arguments:\n"
            "    - name: message"
        )
    logger.debug("Loaded configuration from %s", path)
    return raw_config


def load_signature(file_path: Path | str) -> Signature:
    """
    Load a `Signature` from a YAML or TOML file.

    The file either holds the signature sections at the top level
    (`arguments`, `options`, `flags`) or under a `signature` key.

    Raises:
        ConfigError: If the file is missing, unparsable or invalid.
        SchemaConflictError: If two entries share a name or short alias.
    """
    raw_config = _read_config(file_path)
    section = raw_config.get("signature", raw_config)
    try:
        raw_signature = RawSignature.model_validate(section)
    except ValidationError as error:
        raise ConfigError(f"Invalid signature in {file_path}: {error}") from error
    return raw_signature.to_signature()


def load_command(file_path: Path | str) -> Command:
    """
    Load a `Command` from a YAML or TOML file.

    The file needs a `name`, an `action` dotted import path, and optionally
    `help` and a `signature` section.
    """
    raw_config = _read_config(file_path)
    try:
        raw_command = RawCommand.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid command in {file_path}: {error}") from error
    return raw_command.to_command()
