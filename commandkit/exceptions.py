# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the CommandKit framework.

Declaration errors are raised while a `Signature` is being built and indicate a
programming error in the command definition. Parse errors are raised by the
signature matcher and carry a `ParseErrorKind` plus the offending token or name,
so callers can render them or map them to exit codes without string matching.

All exceptions inherit from `CommandKitError`, the base exception for the framework.

Exception Hierarchy:
- CommandKitError
    ├── SignatureError
    │   └── SchemaConflictError
    ├── InputExhaustedError
    ├── ConfigError
    └── CommandArgumentError
        ├── MissingOptionValueError
        ├── UnknownOptionError
        ├── MissingArgumentError
        └── UnexpectedArgumentError
"""
from __future__ import annotations

from enum import Enum


class CommandKitError(Exception):
    """Base exception for CommandKit."""


class SignatureError(CommandKitError):
    """Exception raised when an argument, option or flag descriptor is invalid."""


class SchemaConflictError(SignatureError):
    """Exception raised when a name or short alias is declared twice in a signature."""


class InputExhaustedError(CommandKitError):
    """Exception raised when a token is requested from an empty command input."""


class ConfigError(CommandKitError):
    """Exception raised when a command configuration file cannot be loaded."""


class ParseErrorKind(Enum):
    """Distinguishes the ways a command input can fail to match a signature."""

    MISSING_OPTION_VALUE = "missing_option_value"
    UNKNOWN_OPTION = "unknown_option"
    MISSING_ARGUMENT = "missing_argument"
    UNEXPECTED_ARGUMENT = "unexpected_argument"

    def __str__(self) -> str:
        return self.value


class CommandArgumentError(CommandKitError):
    """
    Exception raised when the command input does not match the signature.

    Attributes:
        kind (ParseErrorKind): What went wrong.
        context (str): The offending token, or the name of the argument/option.
    """

    kind: ParseErrorKind

    def __init__(self, context: str, message: str | None = None) -> None:
        self.context = context
        super().__init__(message or self.default_message(context))

    def default_message(self, context: str) -> str:
        return context


class MissingOptionValueError(CommandArgumentError):
    """Exception raised when an option is the last token and has no value."""

    kind = ParseErrorKind.MISSING_OPTION_VALUE

    def default_message(self, context: str) -> str:
        return f"Missing value for option '{context}'"


class UnknownOptionError(CommandArgumentError):
    """Exception raised when a dashed token matches no declared option or flag."""

    kind = ParseErrorKind.UNKNOWN_OPTION

    def default_message(self, context: str) -> str:
        return f"Unrecognized option '{context}'. Use --help to see available options."


class MissingArgumentError(CommandArgumentError):
    """Exception raised when a required positional argument has no token."""

    kind = ParseErrorKind.MISSING_ARGUMENT

    def default_message(self, context: str) -> str:
        return f"Missing required argument '{context}'"


class UnexpectedArgumentError(CommandArgumentError):
    """Exception raised when there are more positional tokens than arguments."""

    kind = ParseErrorKind.UNEXPECTED_ARGUMENT

    def default_message(self, context: str) -> str:
        return f"Unexpected positional argument: {context}"
