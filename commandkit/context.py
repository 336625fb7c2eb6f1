# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandContext`, the per-invocation state handed to a command.

A context pairs the output sink with the `CommandInput` for one invocation. It is
created by `run_command` (or by the caller) and discarded once the command has
finished.
"""
from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from commandkit.output import OutputSink, RichOutputSink
from commandkit.parser.token_stream import CommandInput


class CommandContext(BaseModel):
    """
    Runtime state for a single command invocation.

    Attributes:
        console (OutputSink): Where help, autocomplete and command output go.
        input (CommandInput): Tokens of the invocation, executable first.
    """

    console: OutputSink = Field(default_factory=RichOutputSink)
    input: CommandInput

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def from_argv(
        cls, argv: Sequence[str], console: OutputSink | None = None
    ) -> CommandContext:
        """Build a context from raw tokens such as `sys.argv`."""
        if console is None:
            return cls(input=CommandInput(argv))
        return cls(console=console, input=CommandInput(argv))

    @property
    def executable(self) -> str:
        return self.input.executable
