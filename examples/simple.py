import sys

from commandkit import Command, SignatureBuilder, run_command
from commandkit.utils import setup_logging

setup_logging()

signature = (
    SignatureBuilder()
    .add_argument("name", help="Who to greet.")
    .add_argument("greeting", help="What to say.", optional=True)
    .add_option("punctuation", short="p", help="Trailing punctuation.")
    .add_flag("shout", short="s", help="Print in upper case.")
    .build()
)


def greet(context, result):
    text = f"{result.get('greeting', 'Hello')}, {result['name']}{result.get('punctuation', '!')}"
    if result.has_flag("shout"):
        text = text.upper()
    context.console.emit(text)


greet_command = Command(
    name="greet",
    signature=signature,
    action=greet,
    help_text="Greets someone.",
)

# Entry point
if __name__ == "__main__":
    sys.exit(run_command(greet_command))
