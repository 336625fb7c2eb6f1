# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Bundled `cowsay` command, run by `python -m commandkit` when no configuration
file is found.

    $ python -m commandkit "I'm a dead cow" -e xx -t U
      --------------
    < I'm a dead cow >
      --------------
              \\   ^__^
               \\  (xx\\_______
                  (__)\\       )\\/\\
                    U  ||----w |
                       ||     ||
"""
from __future__ import annotations

from commandkit.command import Command
from commandkit.context import CommandContext
from commandkit.parser.argument import Argument, Flag, Option
from commandkit.parser.parser_types import ParseResult
from commandkit.parser.signature import Signature

COWSAY_SIGNATURE = Signature(
    [
        Argument("message", help="What the cow says."),
        Option("eyes", short="e", help="Change the cow's eyes."),
        Option("tongue", short="t", help="Change the cow's tongue."),
        Flag("dead", short="d", help="Draw a dead cow."),
    ]
)


def render_cow(message: str, eyes: str = "oo", tongue: str = " ") -> str:
    """Return the ASCII cow saying `message`."""
    padding = "-" * len(message)
    return (
        f"  {padding}\n"
        f"< {message} >\n"
        f"  {padding}\n"
        "          \\   ^__^\n"
        f"           \\  ({eyes}\\_______\n"
        "              (__)\\       )\\/\\\n"
        f"                {tongue}  ||----w |\n"
        "                   ||     ||"
    )


def cowsay(context: CommandContext, result: ParseResult) -> str:
    eyes = "xx" if result.has_flag("dead") else "oo"
    text = render_cow(
        result["message"],
        eyes=result.get("eyes", eyes),
        tongue=result.get("tongue", " "),
    )
    for line in text.split("\n"):
        context.console.emit(line)
    return text


cowsay_command = Command(
    name="cowsay",
    signature=COWSAY_SIGNATURE,
    action=cowsay,
    help_text="Generates ASCII picture of a cow with a message.",
)
