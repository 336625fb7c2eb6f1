# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the descriptor dataclasses a `Signature` is built from.

Each descriptor describes one CLI input:

- `Argument`: a positional value, required unless `optional=True`.
- `Option`: a named value (`--eyes xx` or `-e xx`), always optional.
- `Flag`: a named boolean that is either present or absent (`--dead`, `-d`).

Descriptors are frozen so a built `Signature` can be shared between invocations.
They only carry data and render their own usage fragments; validation of names
and collisions happens when the `Signature` is constructed.

Example:
    Argument("message", help="What the cow says")
    Option("eyes", short="e", help="Change the eyes")
    Flag("dead", short="d")
"""
from __future__ import annotations

from dataclasses import dataclass

from commandkit.output import ConsoleStyle


@dataclass(frozen=True)
class Argument:
    """
    Represents a positional command-line argument.

    Attributes:
        name (str): Key of the argument in the parse result and its usage label.
        help (str): Help text for the argument.
        optional (bool): True if the argument may be omitted.
    """

    name: str
    help: str = ""
    optional: bool = False

    style = ConsoleStyle.WARNING

    @property
    def required(self) -> bool:
        return not self.optional

    def get_usage_text(self) -> str:
        """Get the usage fragment for the argument (e.g. `<message>`)."""
        return f"<{self.name}>"


@dataclass(frozen=True)
class Option:
    """
    Represents a named command-line option taking exactly one value.

    Attributes:
        name (str): Long name, matched as `--name`.
        short (str | None): Single character alias, matched as `-s`.
        help (str): Help text for the option.
    """

    name: str
    short: str | None = None
    help: str = ""

    style = ConsoleStyle.SUCCESS

    @property
    def flags(self) -> tuple[str, ...]:
        """Return every token spelling that selects this option."""
        if self.short:
            return (f"--{self.name}", f"-{self.short}")
        return (f"--{self.name}",)

    def get_usage_text(self) -> str:
        """Get the usage fragment for the option (e.g. `[--eyes,-e]`)."""
        return f"[{','.join(self.flags)}]"


@dataclass(frozen=True)
class Flag:
    """
    Represents a presence-only command-line flag.

    Attributes:
        name (str): Long name, matched as `--name`.
        short (str | None): Single character alias, matched as `-s`.
        help (str): Help text for the flag.
    """

    name: str
    short: str | None = None
    help: str = ""

    style = ConsoleStyle.INFO

    @property
    def flags(self) -> tuple[str, ...]:
        """Return every token spelling that selects this flag."""
        if self.short:
            return (f"--{self.name}", f"-{self.short}")
        return (f"--{self.name}",)

    def get_usage_text(self) -> str:
        """Get the usage fragment for the flag (e.g. `[--dead,-d]`)."""
        return f"[{','.join(self.flags)}]"


Descriptor = Argument | Option | Flag
