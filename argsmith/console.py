# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argsmith output."""
from rich.console import Console

from argsmith.themes import get_nord_theme

console = Console(theme=get_nord_theme())
