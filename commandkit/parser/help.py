# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders command help from a `Signature`.

Output layout:

    Usage: cowsay <message> [--eyes,-e] [--tongue,-t] [--dead,-d]

    Generates ASCII picture of a cow with a message.

    Arguments:
      message What the cow says

    Options:
         eyes Change the eyes
       tongue Change the tongue

    Flags:
         dead Dead cow

Names are right-aligned in a column `max(name lengths) + 2` wide, computed over
all three categories so the help text lines up across sections. Help text
spanning several lines is continued under the first line. Sections are only
rendered for categories that have entries.
"""
from __future__ import annotations

from typing import Sequence

from commandkit.output import ConsoleStyle, OutputSink
from commandkit.parser.argument import Argument, Flag, Option
from commandkit.parser.signature import Signature


def help_padding(signature: Signature) -> int:
    """Return the width of the name column for `signature`."""
    return max((len(name) for name in signature.names), default=0) + 2


def render_usage(signature: Signature, executable: str, sink: OutputSink) -> None:
    """Emit the `Usage:` line."""
    sink.emit("Usage: ", ConsoleStyle.INFO, newline=False)
    sink.emit(f"{executable} ", ConsoleStyle.PLAIN, newline=False)
    for descriptor in signature:
        sink.emit(f"{descriptor.get_usage_text()} ", descriptor.style, newline=False)
    sink.emit("")


def render_help_item(
    name: str,
    help_text: str,
    style: ConsoleStyle,
    padding: int,
    sink: OutputSink,
) -> None:
    """Emit one `name help` line, continuing multi-line help under the first line."""
    sink.emit(name.rjust(padding), style, newline=False)
    first, *rest = help_text.split("\n") if help_text else [""]
    sink.emit(f" {first}" if first else "")
    for line in rest:
        sink.emit(" " * (padding + 1) + line)


def _render_section(
    title: str,
    items: Sequence[Argument | Option | Flag],
    padding: int,
    sink: OutputSink,
) -> None:
    if not items:
        return
    sink.emit("")
    sink.emit(title, ConsoleStyle.INFO, bold=True)
    for item in items:
        render_help_item(item.name, item.help, item.style, padding, sink)


def render_help(
    signature: Signature,
    help_text: str,
    executable: str,
    sink: OutputSink,
) -> None:
    """
    Render usage, description and categorized help for a signature.

    Args:
        signature (Signature): The command's signature.
        help_text (str): Free-text description of the command, may be empty.
        executable (str): Name shown in the usage line (usually argv[0]).
        sink (OutputSink): Destination of the styled output.
    """
    render_usage(signature, executable, sink)

    if help_text:
        sink.emit("")
        sink.emit(help_text)

    padding = help_padding(signature)
    _render_section("Arguments:", signature.arguments, padding, sink)
    _render_section("Options:", signature.options, padding, sink)
    _render_section("Flags:", signature.flags, padding, sink)
