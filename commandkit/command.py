# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class for CommandKit.

A Command binds a `Signature` to an action. The action is a plain callable
receiving the `CommandContext` and the `ParseResult`; no subclassing is needed:

    def cowsay(context: CommandContext, result: ParseResult) -> None:
        ...

    command = Command(name="cowsay", signature=signature, action=cowsay)
    command.run(context)

Help and autocomplete output are rendered from the same signature the input is
parsed with.
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, field_validator

from commandkit.context import CommandContext
from commandkit.logger import logger
from commandkit.parser.autocomplete import render_autocomplete
from commandkit.parser.help import render_help
from commandkit.parser.matcher import match_signature
from commandkit.parser.parser_types import ParseResult
from commandkit.parser.signature import Signature


class Command(BaseModel):
    """
    A named command with a signature and an action.

    Attributes:
        name (str): Name of the command, used in log messages.
        signature (Signature): Declared arguments, options and flags.
        action (Callable[[CommandContext, ParseResult], Any]): Logic to run once the
            input has been matched.
        help_text (str): Description shown in the help output.
    """

    name: str
    signature: Signature
    action: Callable[[CommandContext, ParseResult], Any]
    help_text: str = ""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, action: Any) -> Any:
        if not callable(action):
            raise ValueError("Action must be callable")
        return action

    def parse(self, context: CommandContext) -> ParseResult:
        """Match the context input against the signature."""
        return match_signature(self.signature, context.input)

    def run(self, context: CommandContext) -> Any:
        """Parse the context input and call the action with the result."""
        result = self.parse(context)
        logger.debug("[Command:%s] Parsed %s", self.name, result)
        return self.action(context, result)

    def output_help(self, context: CommandContext) -> None:
        render_help(self.signature, self.help_text, context.executable, context.console)

    def output_autocomplete(self, context: CommandContext) -> None:
        render_autocomplete(self.signature, context.console)

    def __str__(self) -> str:
        return f"Command(name='{self.name}', signature={self.signature})"
