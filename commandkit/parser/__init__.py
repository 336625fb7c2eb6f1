"""
CommandKit CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument, Flag, Option
from .autocomplete import autocomplete_tokens, render_autocomplete
from .help import render_help
from .matcher import match_signature, parse
from .parser_types import ParseResult
from .signature import Signature, SignatureBuilder
from .token_stream import CommandInput

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
    "render_help",
    "render_autocomplete",
    "autocomplete_tokens",
]
