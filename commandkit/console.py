# CommandKit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for CommandKit applications."""
from rich.console import Console

from commandkit.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
