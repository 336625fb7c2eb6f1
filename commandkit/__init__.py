"""
CommandKit CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .context import CommandContext
from .output import BufferedOutputSink, ConsoleStyle, OutputSink, RichOutputSink
from .parser import (
    Argument,
    CommandInput,
    Flag,
    Option,
    ParseResult,
    Signature,
    SignatureBuilder,
    match_signature,
    parse,
)
from .runner import run_command

logger = logging.getLogger("commandkit")


__all__ = [
    "Argument",
    "Option",
    "Flag",
    "Signature",
    "SignatureBuilder",
    "CommandInput",
    "ParseResult",
    "match_signature",
    "parse",
    "Command",
    "CommandContext",
    "ConsoleStyle",
    "OutputSink",
    "RichOutputSink",
    "BufferedOutputSink",
    "run_command",
]
