# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Numeric process exit codes returned by `run_command`.

Shell wrappers can inspect the exit code to tell a usage mistake apart from a
failing command without parsing stderr.

Example::

    $ python -m commandkit
    Missing required argument 'message'
    $ echo $?
    2   # EXIT_INVALID_USAGE
"""

EXIT_SUCCESS = 0
"""The command completed successfully (including help and autocomplete output)."""

EXIT_GENERIC_FAILURE = 1
"""The command action or its configuration failed."""

EXIT_INVALID_USAGE = 2
"""The input did not match the command signature."""
