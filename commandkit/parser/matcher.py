# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Matches a `CommandInput` against a `Signature`.

Matching happens in two passes over the input:

1. Named tokens. A token starting with `--` is a long name and a token made of a
   single `-` plus one character is a short alias. Each one must select a
   declared option or flag, otherwise `UnknownOptionError` is raised. An option
   consumes the token right after it as its value, whatever that token looks
   like, so `--tongue --eyes` sets `tongue` to `"--eyes"`. There is no `--`
   escape. A flag only records its presence.

2. Positional tokens. Whatever is left is assigned to the declared arguments in
   order. An optional argument only takes a token when enough tokens remain for
   the required arguments after it. Missing required arguments raise
   `MissingArgumentError` and leftovers raise `UnexpectedArgumentError`.

Matching is exact and case-sensitive; there is no prefix or fuzzy matching.
Consumed tokens are removed from the input, so every token is used once.
"""
from __future__ import annotations

from commandkit.exceptions import (
    InputExhaustedError,
    MissingArgumentError,
    MissingOptionValueError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from commandkit.logger import logger
from commandkit.parser.argument import Argument, Option
from commandkit.parser.parser_types import ParseResult
from commandkit.parser.signature import Signature
from commandkit.parser.token_stream import CommandInput


def is_named_token(token: str) -> bool:
    """Return True if `token` is spelled like an option or flag (`--name` or `-x`)."""
    return token.startswith("--") or (token.startswith("-") and len(token) == 2)


def _consume_named(
    signature: Signature,
    command_input: CommandInput,
) -> tuple[dict[str, str | None], set[str]]:
    options: dict[str, str | None] = {option.name: None for option in signature.options}
    flags: set[str] = set()
    index = 0
    while index < len(command_input):
        token = command_input[index]
        if not is_named_token(token):
            index += 1
            continue

        descriptor = signature.resolve_token(token)
        if descriptor is None:
            logger.debug("Unrecognized option token '%s'", token)
            raise UnknownOptionError(token)

        command_input.pop(index)
        if isinstance(descriptor, Option):
            try:
                value = command_input.pop(index)
            except InputExhaustedError as error:
                raise MissingOptionValueError(descriptor.name) from error
            if options[descriptor.name] is not None:
                logger.debug(
                    "Option '%s' given again, replacing %r with %r",
                    descriptor.name,
                    options[descriptor.name],
                    value,
                )
            options[descriptor.name] = value
        else:
            flags.add(descriptor.name)
    return options, flags


def _assign_positional(
    arguments: tuple[Argument, ...],
    command_input: CommandInput,
) -> dict[str, str | None]:
    result: dict[str, str | None] = {}
    for position, argument in enumerate(arguments):
        if argument.optional:
            required_after = sum(
                later.required for later in arguments[position + 1 :]
            )
            if len(command_input) > required_after:
                result[argument.name] = command_input.next()
            else:
                result[argument.name] = None
            continue
        if not command_input:
            raise MissingArgumentError(argument.name)
        result[argument.name] = command_input.next()

    surplus = command_input.peek()
    if surplus is not None:
        raise UnexpectedArgumentError(surplus)
    return result


def match_signature(signature: Signature, command_input: CommandInput) -> ParseResult:
    """
    Match the tokens of `command_input` against `signature`.

    The input is consumed in the process; build a fresh `CommandInput` to parse
    the same tokens again.

    Args:
        signature (Signature): Declared arguments, options and flags.
        command_input (CommandInput): Tokens of one invocation.

    Returns:
        ParseResult: Values for every declared argument and option, plus the
        flags that were present.

    Raises:
        UnknownOptionError: A dashed token selects no option or flag.
        MissingOptionValueError: An option is the last token.
        MissingArgumentError: A required argument has no token.
        UnexpectedArgumentError: More positional tokens than arguments.
    """
    logger.debug("Matching %s against %s", command_input, signature)
    options, flags = _consume_named(signature, command_input)
    arguments = _assign_positional(signature.arguments, command_input)
    return ParseResult(arguments=arguments, options=options, flags=frozenset(flags))


def parse(signature: Signature, arguments: list[str]) -> ParseResult:
    """Parse raw tokens (executable name first) against `signature`."""
    return match_signature(signature, CommandInput(arguments))
