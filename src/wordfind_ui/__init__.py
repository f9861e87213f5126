"""Front ends for the word finder: curses picker, Flask UI and the CLI entry point."""
from __future__ import annotations
from .picker import Action, Picker

__all__ = ["Action", "Picker"]
