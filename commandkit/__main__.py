"""
CommandKit CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from pathlib import Path

from commandkit.command import Command
from commandkit.config import find_config, load_command
from commandkit.cowsay import cowsay_command
from commandkit.exceptions import CommandKitError
from commandkit.exit_codes import EXIT_GENERIC_FAILURE
from commandkit.logger import logger
from commandkit.runner import run_command
from commandkit.utils import get_program_invocation, setup_logging


def bootstrap() -> Path | None:
    config_path = find_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main() -> int:
    setup_logging(console_log_level=logging.WARNING)
    config_path = bootstrap()
    command: Command = cowsay_command
    if config_path:
        try:
            command = load_command(config_path)
        except CommandKitError as error:
            logger.error("Could not load command from %s: %s", config_path, error)
            return EXIT_GENERIC_FAILURE
    argv = [get_program_invocation(), *sys.argv[1:]]
    return run_command(command, argv)


if __name__ == "__main__":
    sys.exit(main())
