# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result model produced by the signature matcher.

`ParseResult` holds what one invocation supplied:
- `arguments`: argument name -> matched token (None for an omitted optional argument)
- `options`: option name -> value (None when the option was not given)
- `flags`: names of the flags that were present

It is created once per invocation and handed to the command action.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ParseResult:
    """Typed outcome of matching a command input against a signature."""

    arguments: dict[str, str | None] = field(default_factory=dict)
    options: dict[str, str | None] = field(default_factory=dict)
    flags: frozenset[str] = frozenset()

    def has_flag(self, name: str) -> bool:
        """Return True if the flag `name` was present."""
        return name in self.flags

    def get(self, name: str, default: Any = None) -> Any:
        """Return the argument or option value for `name`, or `default` if absent."""
        if name in self.arguments:
            value = self.arguments[name]
        elif name in self.options:
            value = self.options[name]
        else:
            return default
        return default if value is None else value

    def as_dict(self) -> dict[str, Any]:
        """Flatten the result into a single mapping; present flags map to True."""
        result: dict[str, Any] = {**self.arguments, **self.options}
        result.update({name: True for name in self.flags})
        return result

    def __getitem__(self, name: str) -> Any:
        if name in self.arguments:
            return self.arguments[name]
        if name in self.options:
            return self.options[name]
        raise KeyError(name)
