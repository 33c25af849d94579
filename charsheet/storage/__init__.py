"""
Storage module for the character sheet creator.

Persists named snapshots of character profiles.
"""

from .save_store import SaveNotFoundError, SaveStore

__all__ = [
    "SaveNotFoundError",
    "SaveStore",
]
