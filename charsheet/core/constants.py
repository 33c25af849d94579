"""
Constants and enumerations for the character sheet creator.

Defines default paths, level bounds, storage keys and the enumeration of
free-text fields that make up the character form.
"""

import os
from enum import Enum
from pathlib import Path

# Directory holding the bundled reference data.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Reference table of class content.
CLASSES_FILENAME = "classes.json"

# Default file used to store named character snapshots.
SAVES_FILENAME = "characters.json"

# Root key under which every named snapshot is stored.
SAVES_ROOT_KEY = "myDndCharacters"

# Environment overrides.
DATA_DIR_ENV = "CHARSHEET_DATA_DIR"
SAVE_FILE_ENV = "CHARSHEET_SAVE_FILE"

# Bounds accepted by the class level input.
MIN_CLASS_LEVEL = 1
MAX_CLASS_LEVEL = 30

# Age shown on a fresh character.
DEFAULT_AGE = "ADULT"


def get_data_dir() -> Path:
    """Returns the reference data directory, honouring the environment."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else DEFAULT_DATA_DIR


def get_save_file() -> Path:
    """Returns the snapshot store path, honouring the environment."""
    override = os.environ.get(SAVE_FILE_ENV)
    return Path(override) if override else Path.cwd() / SAVES_FILENAME


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class SheetField(NiceEnum):
    """
    Free-text fields of the character form, in form order.

    The value is the attribute name on the character profile.
    """

    NAME = "name"
    AGE = "age"
    GENDER = "gender"
    PATRON = "patron"
    PERSONALITY = "personality"
    ALIGNMENT = "alignment"
    MORALITY = "morality"
    RACE = "race"
    JOB = "job"
    BACKSTORY = "backstory"
    GOLD = "gold"
    STRENGTH = "strength"
    INTELLIGENCE = "intelligence"
    CHARISMA = "charisma"
    WISDOM = "wisdom"
    CONSTITUTION = "constitution"
    DEXTERITY = "dexterity"
    AC = "ac"
    STEALTH = "stealth"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    HP = "hp"
    SPEED = "speed"
    MODIFIER = "modifier"
    FEAT = "feat"
    UNIQUE_ITEMS = "unique_items"

    @property
    def display_name(self) -> str:
        if self in (SheetField.AC, SheetField.HP):
            return self.name
        return " ".join(part.capitalize() for part in self.name.split("_"))

    @property
    def snapshot_key(self) -> str:
        """Returns the key used for this field in a saved snapshot."""
        head, *tail = self.value.split("_")
        return head + "".join(part.capitalize() for part in tail)

    @classmethod
    def from_string(cls, text: str) -> "SheetField":
        """
        Looks up a field by attribute name, snapshot key or display name.

        Args:
            text (str): The field name typed by the user.

        Raises:
            ValueError: If no field matches.

        """
        key = text.strip().lower().replace(" ", "_")
        for field in cls:
            if key in (field.value, field.snapshot_key.lower()):
                return field
        raise ValueError(f"Unknown sheet field: {text!r}")


STAT_FIELDS = (
    SheetField.STRENGTH,
    SheetField.INTELLIGENCE,
    SheetField.CHARISMA,
    SheetField.WISDOM,
    SheetField.CONSTITUTION,
    SheetField.DEXTERITY,
    SheetField.AC,
    SheetField.STEALTH,
    SheetField.INTIMIDATION,
    SheetField.INVESTIGATION,
    SheetField.HP,
    SheetField.SPEED,
    SheetField.MODIFIER,
)
