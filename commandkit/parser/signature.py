# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Signature`, the single source of truth for a command's inputs.

A signature is built once from an explicit, ordered list of `Argument`, `Option`
and `Flag` descriptors and never changes afterwards. Parsing, help rendering and
autocompletion all read from the same signature, so they cannot disagree.

Construction validates every descriptor and rejects collisions:
- names must be unique across arguments, options and flags
- short aliases must be unique among options and among flags

Both `Signature([...])` and the incremental `SignatureBuilder` are supported:

    signature = (
        SignatureBuilder()
        .add_argument("message", help="What the cow says")
        .add_option("eyes", short="e", help="Change the eyes")
        .add_option("tongue", short="t", help="Change the tongue")
        .build()
    )
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from commandkit.exceptions import SchemaConflictError, SignatureError
from commandkit.logger import logger
from commandkit.parser.argument import Argument, Descriptor, Flag, Option


class Signature:
    """
    Immutable, ordered description of a command's arguments, options and flags.

    Attributes:
        arguments (tuple[Argument, ...]): Positional arguments in input order.
        options (tuple[Option, ...]): Value-taking options in declaration order.
        flags (tuple[Flag, ...]): Presence-only flags in declaration order.
    """

    def __init__(self, descriptors: Iterable[Descriptor] = ()) -> None:
        arguments: list[Argument] = []
        options: list[Option] = []
        flags: list[Flag] = []
        names: dict[str, Descriptor] = {}
        option_map: dict[str, Option] = {}
        flag_map: dict[str, Flag] = {}

        for descriptor in descriptors:
            self._validate_descriptor(descriptor)
            if descriptor.name in names:
                existing = names[descriptor.name]
                raise SchemaConflictError(
                    f"Name '{descriptor.name}' is already used by "
                    f"{type(existing).__name__.lower()} '{existing.name}'"
                )
            names[descriptor.name] = descriptor
            if isinstance(descriptor, Argument):
                arguments.append(descriptor)
            elif isinstance(descriptor, Option):
                self._register_short(descriptor, option_map, "option")
                option_map[descriptor.name] = descriptor
                options.append(descriptor)
            else:
                self._register_short(descriptor, flag_map, "flag")
                flag_map[descriptor.name] = descriptor
                flags.append(descriptor)

        self._arguments: tuple[Argument, ...] = tuple(arguments)
        self._options: tuple[Option, ...] = tuple(options)
        self._flags: tuple[Flag, ...] = tuple(flags)
        self._option_map: Mapping[str, Option] = MappingProxyType(option_map)
        self._flag_map: Mapping[str, Flag] = MappingProxyType(flag_map)
        logger.debug("Built %s", self)

    @staticmethod
    def _validate_descriptor(descriptor: Any) -> None:
        if not isinstance(descriptor, (Argument, Option, Flag)):
            raise SignatureError(
                f"Expected an Argument, Option or Flag, got {type(descriptor).__name__}"
            )
        name = descriptor.name
        if not isinstance(name, str) or not name:
            raise SignatureError("Descriptor name must be a non-empty string")
        if name.startswith("-"):
            raise SignatureError(
                f"Name '{name}' must not start with '-'; dashes are added automatically"
            )
        if any(char.isspace() for char in name):
            raise SignatureError(f"Name '{name}' must not contain whitespace")
        if isinstance(descriptor, (Option, Flag)) and descriptor.short is not None:
            short = descriptor.short
            if (
                not isinstance(short, str)
                or len(short) != 1
                or short == "-"
                or short.isspace()
            ):
                raise SignatureError(
                    f"Short alias {short!r} for '{name}' must be a single character"
                )

    @staticmethod
    def _register_short(
        descriptor: Option | Flag,
        short_map: dict[str, Any],
        category: str,
    ) -> None:
        if descriptor.short is None:
            return
        for existing in short_map.values():
            if existing.short == descriptor.short:
                raise SchemaConflictError(
                    f"Short alias '-{descriptor.short}' for {category} "
                    f"'{descriptor.name}' is already used by '{existing.name}'"
                )

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return self._arguments

    @property
    def options(self) -> tuple[Option, ...]:
        return self._options

    @property
    def flags(self) -> tuple[Flag, ...]:
        return self._flags

    @property
    def names(self) -> list[str]:
        """Return every declared name, arguments first."""
        return [
            descriptor.name
            for descriptor in (*self._arguments, *self._options, *self._flags)
        ]

    @staticmethod
    def _lookup(name_or_short: str, items: Mapping[str, Any]) -> Any:
        match = items.get(name_or_short)
        if match is not None:
            return match
        if len(name_or_short) == 1:
            return next(
                (item for item in items.values() if item.short == name_or_short), None
            )
        return None

    def lookup_option(self, name_or_short: str) -> Option | None:
        """
        Return the option declared with this long name or short alias.

        Args:
            name_or_short (str): A name without dashes (`eyes`) or an alias (`e`).

        Returns:
            Option or None: Matching option, if declared.
        """
        return self._lookup(name_or_short, self._option_map)

    def lookup_flag(self, name_or_short: str) -> Flag | None:
        """Return the flag declared with this long name or short alias."""
        return self._lookup(name_or_short, self._flag_map)

    def resolve_token(self, token: str) -> Option | Flag | None:
        """
        Return the option or flag selected by a dashed command-line token.

        `--name` matches long names only and `-s` matches short aliases only.
        Options are checked before flags, so an option and a flag sharing a
        short alias resolve to the option.

        Args:
            token (str): A raw token such as `--eyes` or `-e`.

        Returns:
            Option, Flag or None: The matching descriptor, if any.
        """
        if token.startswith("--"):
            name = token[2:]
            return self._option_map.get(name) or self._flag_map.get(name)
        if token.startswith("-") and len(token) == 2:
            short = token[1]
            for items in (self._options, self._flags):
                for item in items:
                    if item.short == short:
                        return item
        return None

    def to_definition(self) -> dict[str, list[dict[str, Any]]]:
        """
        Convert the signature into serializable dicts.

        The output has the shape accepted by `commandkit.config.RawSignature`, so
        a signature can be exported to YAML/TOML and loaded again.
        """
        return {
            "arguments": [
                {"name": arg.name, "help": arg.help, "optional": arg.optional}
                for arg in self._arguments
            ],
            "options": [
                {"name": opt.name, "short": opt.short, "help": opt.help}
                for opt in self._options
            ],
            "flags": [
                {"name": flag.name, "short": flag.short, "help": flag.help}
                for flag in self._flags
            ],
        }

    def __iter__(self):
        yield from self._arguments
        yield from self._options
        yield from self._flags

    def __len__(self) -> int:
        return len(self._arguments) + len(self._options) + len(self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return False
        return (
            self._arguments == other._arguments
            and self._options == other._options
            and self._flags == other._flags
        )

    def __hash__(self) -> int:
        return hash((self._arguments, self._options, self._flags))

    def __str__(self) -> str:
        """Return a human-readable summary of the signature."""
        required = sum(argument.required for argument in self._arguments)
        return (
            f"Signature(arguments={len(self._arguments)}, "
            f"options={len(self._options)}, flags={len(self._flags)}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)


class SignatureBuilder:
    """
    Collects descriptors one at a time and builds a `Signature`.

    Every `add_*` method returns the builder so declarations can be chained.
    Conflicts are reported by `build()`.
    """

    def __init__(self) -> None:
        self._descriptors: list[Descriptor] = []

    def add_argument(
        self, name: str, help: str = "", optional: bool = False
    ) -> SignatureBuilder:
        """
        Declare a positional argument.

        Args:
            name (str): Name of the argument, used as its key in the parse result.
            help (str): Help text for rendering in command help.
            optional (bool): Whether the argument may be left out.
        """
        self._descriptors.append(Argument(name=name, help=help, optional=optional))
        return self

    def add_option(
        self, name: str, short: str | None = None, help: str = ""
    ) -> SignatureBuilder:
        """Declare an option that takes exactly one value."""
        self._descriptors.append(Option(name=name, short=short, help=help))
        return self

    def add_flag(
        self, name: str, short: str | None = None, help: str = ""
    ) -> SignatureBuilder:
        """Declare a presence-only flag."""
        self._descriptors.append(Flag(name=name, short=short, help=help))
        return self

    def build(self) -> Signature:
        return Signature(self._descriptors)
