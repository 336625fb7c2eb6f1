import shlex

from prompt_toolkit import PromptSession

from commandkit.completer import SignatureCompleter
from commandkit.cowsay import cowsay_command
from commandkit.runner import run_command

session = PromptSession(completer=SignatureCompleter(cowsay_command.signature))

if __name__ == "__main__":
    while True:
        try:
            text = session.prompt("cowsay > ")
        except (EOFError, KeyboardInterrupt):
            break
        run_command(cowsay_command, ["cowsay", *shlex.split(text)])
