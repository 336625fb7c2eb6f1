# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Output sinks for help, autocomplete and error text.

Renderers never talk to a terminal directly. They emit text segments tagged with a
`ConsoleStyle` to an `OutputSink`, and the sink decides how the style is presented.

Sinks:
- `RichOutputSink`: writes to a rich `Console`, mapping each style onto the
  CommandKit theme.
- `BufferedOutputSink`: records segments in memory, for embedding the output in
  another program and for tests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.text import Text

from commandkit.console import console as default_console


class ConsoleStyle(Enum):
    """Closed set of presentation tags understood by output sinks."""

    PLAIN = "plain"
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class OutputSink(Protocol):
    def emit(
        self,
        text: str,
        style: ConsoleStyle = ConsoleStyle.PLAIN,
        newline: bool = True,
        bold: bool = False,
    ) -> None: ...


class RichOutputSink:
    """Writes styled segments to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or default_console

    def emit(
        self,
        text: str,
        style: ConsoleStyle = ConsoleStyle.PLAIN,
        newline: bool = True,
        bold: bool = False,
    ) -> None:
        segment = Text(text, style=style.value)
        if bold:
            segment.stylize("bold")
        self.console.print(
            segment, end="\n" if newline else "", highlight=False, soft_wrap=True
        )


@dataclass(frozen=True)
class Segment:
    """A single emitted piece of text."""

    text: str
    style: ConsoleStyle
    newline: bool
    bold: bool = False


@dataclass
class BufferedOutputSink:
    """Collects emitted segments instead of printing them."""

    segments: list[Segment] = field(default_factory=list)

    def emit(
        self,
        text: str,
        style: ConsoleStyle = ConsoleStyle.PLAIN,
        newline: bool = True,
        bold: bool = False,
    ) -> None:
        self.segments.append(Segment(text, style, newline, bold))

    @property
    def text(self) -> str:
        """Return the recorded output as plain text."""
        return "".join(
            segment.text + ("\n" if segment.newline else "") for segment in self.segments
        )

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

    def styled(self, style: ConsoleStyle) -> list[str]:
        """Return the text of every segment emitted with `style`."""
        return [segment.text for segment in self.segments if segment.style == style]

    def clear(self) -> None:
        self.segments.clear()
