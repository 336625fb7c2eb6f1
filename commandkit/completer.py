# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `SignatureCompleter`, a Prompt Toolkit completer driven by a `Signature`.

Suggestions come from the same hints as `--autocomplete` output:
- argument names while positional slots are still open
- `--option` / `--flag` names (and `-x` aliases when the stub starts with a
  single dash) that have not been used yet

Nothing is suggested right after an option, since any token is a valid value.
Completions sharing a longer common prefix insert that prefix first, and
completions containing whitespace are quoted.
"""
from __future__ import annotations

import os
import shlex
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from commandkit.parser.argument import Option
from commandkit.parser.autocomplete import autocomplete_tokens
from commandkit.parser.matcher import is_named_token
from commandkit.parser.signature import Signature


class SignatureCompleter(Completer):
    """
    Prompt Toolkit completer for the input of a single command.

    Args:
        signature (Signature): The command signature to complete against.
    """

    def __init__(self, signature: Signature):
        self.signature = signature

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Compute completions for the current user input.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event; not used here.

        Yields:
            Completion: Completions matching the current stub text.
        """
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = not text or text.endswith((" ", "\t"))
        typed = tokens if cursor_at_end_of_token else tokens[:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]

        suggestions = self.suggest_next(typed, stub)
        yield from self._yield_lcp_completions(suggestions, stub)

    def suggest_next(self, typed: list[str], stub: str = "") -> list[str]:
        """
        Return candidate tokens for the position after `typed`.

        Args:
            typed (list[str]): Complete tokens already entered (no executable).
            stub (str): The partial token under the cursor.
        """
        used: set[str] = set()
        positional = 0
        skip_value = False
        for token in typed:
            if skip_value:
                skip_value = False
                continue
            descriptor = (
                self.signature.resolve_token(token) if is_named_token(token) else None
            )
            if descriptor is None:
                if not is_named_token(token):
                    positional += 1
                continue
            used.add(descriptor.name)
            skip_value = isinstance(descriptor, Option)
        if skip_value:
            return []

        suggestions = [
            argument.name for argument in self.signature.arguments[positional:]
        ]
        for token in autocomplete_tokens(self.signature):
            if token.startswith("--") and token[2:] not in used:
                suggestions.append(token)
        if stub.startswith("-") and not stub.startswith("--"):
            for item in (*self.signature.options, *self.signature.flags):
                if item.short and item.name not in used:
                    suggestions.append(f"-{item.short}")
        return suggestions

    def _ensure_quote(self, text: str) -> str:
        """Quote completions containing whitespace."""
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match, yield it fully.
        - If multiple matches share a longer prefix, insert the prefix and also
          display all matches in the menu.
        - Otherwise list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
