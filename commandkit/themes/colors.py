# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palettes and the rich `Theme` used by CommandKit output.

Palette classes expose hex colors as class attributes. Any attribute with a `_b`
suffix resolves to the bold variant of the base color (`NordColors.FROST_b` ->
`"bold #88C0D0"`), so palette values can be dropped straight into rich markup
or `Style.parse`.

The theme maps the output style names understood by `commandkit.output`
(`plain`, `info`, `warning`, `success`, `error`) onto the Nord palette.
"""
from rich.theme import Theme


class ColorsMeta(type):
    """Metaclass resolving `<NAME>_b` attributes to bold variants of `<NAME>`."""

    def __getattr__(cls, name: str) -> str:
        if name.endswith("_b"):
            base = name[:-2]
            color = cls.__dict__.get(base)
            if isinstance(color, str):
                return f"bold {color}"
        raise AttributeError(f"'{cls.__name__}' has no color named '{name}'")


class NordColors(metaclass=ColorsMeta):
    """Nord palette, https://www.nordtheme.com/docs/colors-and-palettes."""

    POLAR_NIGHT_ORIGIN = "#2E3440"
    POLAR_NIGHT_BRIGHTEST = "#4C566A"
    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    SNOW_STORM = "#D8DEE9"
    FROST_TEAL = "#8FBCBB"
    FROST = "#88C0D0"
    FROST_LIGHT_BLUE = "#81A1C1"
    FROST_DEEP_BLUE = "#5E81AC"
    RED = "#BF616A"
    ORANGE = "#D08770"
    YELLOW = "#EBCB8B"
    GREEN = "#A3BE8C"
    PURPLE = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the rich theme backing the CommandKit output styles."""
    return Theme(
        {
            "plain": NordColors.SNOW_STORM,
            "info": NordColors.FROST,
            "warning": NordColors.YELLOW,
            "success": NordColors.GREEN,
            "error": NordColors.RED_b,
            "header": NordColors.FROST_b,
            "dim": NordColors.POLAR_NIGHT_BRIGHTEST,
            "logging.level.debug": NordColors.POLAR_NIGHT_BRIGHTEST,
            "logging.level.info": NordColors.FROST,
            "logging.level.warning": NordColors.YELLOW,
            "logging.level.error": NordColors.RED_b,
        }
    )
