# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Derives autocompletion hints from a `Signature`.

The hint list is flat and ordered: argument names, then `--option` names, then
`--flag` names. Shell integrations read the single space-separated line emitted
by `render_autocomplete`; no shell-specific script is generated.
"""
from __future__ import annotations

from commandkit.output import ConsoleStyle, OutputSink
from commandkit.parser.signature import Signature


def autocomplete_tokens(signature: Signature) -> list[str]:
    """Return completion tokens in signature order."""
    tokens = [argument.name for argument in signature.arguments]
    tokens += [f"--{option.name}" for option in signature.options]
    tokens += [f"--{flag.name}" for flag in signature.flags]
    return tokens


def render_autocomplete(signature: Signature, sink: OutputSink) -> None:
    """Emit the completion tokens as one plain line."""
    sink.emit(" ".join(autocomplete_tokens(signature)), ConsoleStyle.PLAIN)
