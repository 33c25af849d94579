"""
User interface module for the character sheet creator.

This module provides the command-line interface of the sheet creator.
"""

from .cli_interface import SheetCLI

__all__ = [
    "SheetCLI",
]
