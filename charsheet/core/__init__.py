"""
Core system module for the character sheet creator.

This module contains the fundamental components of the sheet creator,
including constants, console and logging helpers, and level range handling.
The aggregation engine (core.aggregation), the content repository
(core.content), validation (core.validation) and sheet rendering
(core.sheets) are imported from their own modules.
"""

from .constants import (
    MAX_CLASS_LEVEL,
    MIN_CLASS_LEVEL,
    SheetField,
)
from .level_range import (
    LevelRange,
    combine_level_ranges,
    format_level,
    get_unlocked_abilities,
    get_unlocked_tiers,
    parse_level_range,
)
from .logging import (
    get_logger,
    setup_logging,
)
from .utils import (
    Singleton,
    ccapture,
    cprint,
    crule,
    make_unique,
    title_case,
)

__all__ = [
    # Import from constants.py
    "MAX_CLASS_LEVEL",
    "MIN_CLASS_LEVEL",
    "SheetField",
    # Import from level_range.py
    "LevelRange",
    "combine_level_ranges",
    "format_level",
    "get_unlocked_abilities",
    "get_unlocked_tiers",
    "parse_level_range",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "Singleton",
    "ccapture",
    "cprint",
    "crule",
    "make_unique",
    "title_case",
]
