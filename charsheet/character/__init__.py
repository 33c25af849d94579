"""
Character module for the character sheet creator.

This module holds the character-side models: the class reference entries,
the class selections made by the player, the character profile and its
snapshot serialization.
"""

from .character_class import ClassReferenceEntry
from .character_serialization import (
    export_profile,
    load_profile,
    profile_from_dict,
    profile_to_dict,
)
from .main import CharacterProfile
from .selection import ClassSelection

__all__ = [
    # Import from character_class.py
    "ClassReferenceEntry",
    # Import from character_serialization.py
    "export_profile",
    "load_profile",
    "profile_from_dict",
    "profile_to_dict",
    # Import from main.py
    "CharacterProfile",
    # Import from selection.py
    "ClassSelection",
]
