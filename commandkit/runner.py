# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Runs a `Command` for a raw invocation and maps the outcome to an exit code.

Before matching, the runner looks for the reserved tokens:
- `--help` / `-h`: render the command help and stop
- `--autocomplete`: render the autocomplete hints and stop

A reserved token is only honored when the command signature does not declare it
itself. Parse errors are rendered in the `error` style followed by the help, so
the user sees what went wrong and what is accepted.
"""
from __future__ import annotations

import sys
from typing import Sequence

from commandkit.command import Command
from commandkit.context import CommandContext
from commandkit.exceptions import CommandArgumentError, CommandKitError
from commandkit.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INVALID_USAGE, EXIT_SUCCESS
from commandkit.logger import logger
from commandkit.output import ConsoleStyle, OutputSink
from commandkit.parser.argument import Option
from commandkit.parser.matcher import is_named_token

HELP_TOKENS = ("--help", "-h")
AUTOCOMPLETE_TOKEN = "--autocomplete"


def _is_reserved(command: Command, context: CommandContext, tokens: Sequence[str]) -> bool:
    """Return True if one of `tokens` appears outside an option value."""
    skip_value = False
    for token in context.input:
        if skip_value:
            skip_value = False
            continue
        if not is_named_token(token):
            continue
        descriptor = command.signature.resolve_token(token)
        if descriptor is None and token in tokens:
            return True
        skip_value = isinstance(descriptor, Option)
    return False


def run_command(
    command: Command,
    argv: Sequence[str] | None = None,
    sink: OutputSink | None = None,
) -> int:
    """
    Run `command` for one invocation.

    Args:
        command (Command): The command to run.
        argv (Sequence[str] | None): Raw tokens, executable first. Defaults to
            `sys.argv`.
        sink (OutputSink | None): Output destination. Defaults to the rich console.

    Returns:
        int: `EXIT_SUCCESS`, `EXIT_INVALID_USAGE` for parse errors, or
        `EXIT_GENERIC_FAILURE` for any other CommandKit error.
    """
    context = CommandContext.from_argv(sys.argv if argv is None else argv, sink)

    if _is_reserved(command, context, HELP_TOKENS):
        command.output_help(context)
        return EXIT_SUCCESS
    if _is_reserved(command, context, (AUTOCOMPLETE_TOKEN,)):
        command.output_autocomplete(context)
        return EXIT_SUCCESS

    logger.debug("[Command:%s] Running with %s", command.name, context.input)
    try:
        command.run(context)
    except CommandArgumentError as error:
        logger.debug(
            "[Command:%s] %s (%s: %s)", command.name, error, error.kind, error.context
        )
        context.console.emit(f"Error: {error}", ConsoleStyle.ERROR)
        context.console.emit("")
        command.output_help(context)
        return EXIT_INVALID_USAGE
    except CommandKitError as error:
        logger.error("[Command:%s] %s", command.name, error)
        context.console.emit(f"Error: {error}", ConsoleStyle.ERROR)
        return EXIT_GENERIC_FAILURE
    return EXIT_SUCCESS
