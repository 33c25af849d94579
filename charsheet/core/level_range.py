"""
Level range parsing and level-gated content filtering.

Reference data gates content behind level-range tokens such as "3-7th" or
"5". A token only unlocks by its start: content is available once the
character level reaches the start of its range. The end of a range is only
used when several unlocked ranges are merged for display.
"""

import math
import re
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

_NOT_RANGE_CHARS = re.compile(r"[^0-9-]")


class LevelRange(BaseModel):
    """
    Closed interval of character levels.

    A bound that could not be read from its token is NaN, and a range with a
    NaN start never unlocks.
    """

    model_config = ConfigDict(frozen=True)

    start: float = Field(
        description="First level of the range, NaN when unreadable.",
    )
    end: float = Field(
        description="Last level of the range, NaN when unreadable.",
    )

    def is_unlocked(self, level: float) -> bool:
        """
        Checks whether a character of the given level has reached this range.

        Args:
            level (float): The class level of the character.

        Returns:
            bool: True if level >= start, False otherwise (including NaN).

        """
        return level >= self.start


def format_level(value: float) -> str:
    """Formats a level number, printing whole numbers without decimals."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
    return str(value)


def parse_level_range(token: str) -> LevelRange:
    """
    Parses a level-range token into a LevelRange.

    Everything except digits and hyphens is dropped first, so "3-7th" reads
    as [3, 7] and "5" as [5, 5]. Tokens without any digits ("abc") give a
    NaN range instead of raising.

    Args:
        token (str): The level-range token.

    Returns:
        LevelRange: The parsed range.

    """
    cleaned = _NOT_RANGE_CHARS.sub("", token)
    if "-" in cleaned:
        start, end = cleaned.split("-")[:2]
        # An empty side of the hyphen reads as zero.
        return LevelRange(start=int(start or 0), end=int(end or 0))
    single = int(cleaned) if cleaned else math.nan
    return LevelRange(start=single, end=single)


def get_unlocked_tiers(spell_chunks: Iterable[str], level: float) -> list[str]:
    """
    Returns the spell tiers available at a level.

    Args:
        spell_chunks (Iterable[str]): The class tier tokens, in reference order.
        level (float): The class level of the character.

    Returns:
        list[str]: The unlocked tokens, in their original order.

    """
    return [
        chunk for chunk in spell_chunks if parse_level_range(chunk).is_unlocked(level)
    ]


def get_unlocked_abilities(
    casual_abilities: Mapping[str, list[str]], level: float
) -> list[str]:
    """
    Collects the casual abilities available at a level.

    Keys are visited in insertion order and every unlocked key contributes
    its whole list. Repeated names across keys are kept.

    Args:
        casual_abilities (Mapping[str, list[str]]): Level-range token to ability names.
        level (float): The class level of the character.

    Returns:
        list[str]: The unlocked ability names.

    """
    unlocked: list[str] = []
    for range_token, abilities in casual_abilities.items():
        if parse_level_range(range_token).is_unlocked(level):
            unlocked.extend(abilities)
    return unlocked


def combine_level_ranges(tokens: Iterable[str]) -> str:
    """
    Merges level-range tokens into one "{min}-{max}th" summary.

    The result is the bounding envelope of all the ranges, gaps between
    them are not reported.

    Args:
        tokens (Iterable[str]): The tokens to merge.

    Returns:
        str: The merged range, or an empty string if there are no tokens.

    """
    ranges = [parse_level_range(token) for token in tokens]
    if not ranges:
        return ""
    min_start = math.inf
    max_end = -math.inf
    # NaN bounds fail both comparisons and are skipped.
    for level_range in ranges:
        if level_range.start < min_start:
            min_start = level_range.start
        if level_range.end > max_end:
            max_end = level_range.end
    return f"{format_level(min_start)}-{format_level(max_end)}th"
