# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandInput`, the token stream consumed by the signature matcher.

The first token is the executable name. It is kept aside and never offered for
matching. The remaining tokens are consumed destructively: `next()` pops from the
front and `remove()` deletes a specific token, so a token can be matched at most
once. This is what keeps an option's value from also being seen as a positional
argument.

Example:
    command_input = CommandInput(["cowsay", "Hello", "-e", "xx"])
    command_input.executable    # "cowsay"
    command_input.peek()        # "Hello"
    command_input.remove("-e")
    command_input.remaining     # ["Hello", "xx"]
"""
from __future__ import annotations

from typing import Iterator, Sequence

from commandkit.exceptions import InputExhaustedError


class CommandInput:
    """
    Ordered, consumable view over a command invocation.

    Args:
        arguments (Sequence[str]): Raw tokens, executable name first
            (typically `sys.argv`).
    """

    def __init__(self, arguments: Sequence[str]) -> None:
        tokens = list(arguments)
        if tokens and not all(isinstance(token, str) for token in tokens):
            raise TypeError("CommandInput tokens must all be strings")
        self._executable: str = tokens[0] if tokens else ""
        self._tokens: list[str] = tokens[1:]

    @property
    def executable(self) -> str:
        """Return the reserved first token."""
        return self._executable

    @property
    def remaining(self) -> list[str]:
        """Return a copy of the tokens that have not been consumed yet."""
        return list(self._tokens)

    def peek(self) -> str | None:
        """Return the next token without consuming it."""
        return self._tokens[0] if self._tokens else None

    def next(self) -> str:
        """
        Consume and return the next token.

        Raises:
            InputExhaustedError: If every token has been consumed.
        """
        if not self._tokens:
            raise InputExhaustedError("No more tokens in command input")
        return self._tokens.pop(0)

    def remove(self, token: str) -> bool:
        """
        Remove the first occurrence of `token`.

        Returns:
            bool: True if a token was removed.
        """
        try:
            self._tokens.remove(token)
        except ValueError:
            return False
        return True

    def pop(self, index: int) -> str:
        """Consume and return the token at `index`."""
        try:
            return self._tokens.pop(index)
        except IndexError as error:
            raise InputExhaustedError(
                f"No token at position {index} in command input"
            ) from error

    def __getitem__(self, index: int) -> str:
        return self._tokens[index]

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __str__(self) -> str:
        return f"CommandInput(executable={self._executable!r}, tokens={self._tokens!r})"

    def __repr__(self) -> str:
        return str(self)
