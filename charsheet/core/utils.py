"""
Utilities module for the character sheet creator.

Provides common utility functions and helpers, including console printing
with rich formatting, the singleton pattern, and the small text helpers used
when aggregating class content.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


# ---- Singleton Metaclass ----


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """Metaclass that returns the same instance every time."""

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


# ---- Text Helpers ----


_H = TypeVar("_H", bound=Hashable)


def title_case(text: str) -> str:
    """
    Formats a class key for display.

    Every space separated word gets its first character upper-cased and the
    rest lower-cased, e.g. "eldritch KNIGHT" becomes "Eldritch Knight".

    Args:
        text (str): The raw class name.

    Returns:
        str: The display title.

    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def make_unique(items: Iterable[_H]) -> list[_H]:
    """
    Removes repeated entries while keeping the first occurrence of each.

    Args:
        items (Iterable[_H]): The ordered entries.

    Returns:
        list[_H]: The entries without duplicates, in first-seen order.

    """
    seen: set[_H] = set()
    unique: list[_H] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique
