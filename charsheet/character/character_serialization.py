"""
Character profile serialization and deserialization functions.

Snapshots use the camelCase keys of the stored character format
("uniqueItems", "selectedClasses", "className").
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning

from charsheet.core.constants import SheetField
from charsheet.core.validation import validate_snapshot_data

from .main import CharacterProfile
from .selection import ClassSelection


def profile_to_dict(profile: CharacterProfile) -> dict[str, Any]:
    """
    Converts a CharacterProfile into a snapshot dictionary.

    Args:
        profile (CharacterProfile):
            The profile to convert.

    Returns:
        dict[str, Any]:
            The snapshot, ready to be written as JSON.

    """
    data: dict[str, Any] = {
        field.snapshot_key: profile.get_field(field) for field in SheetField
    }
    data["selectedClasses"] = [
        selection.model_dump(by_alias=True) for selection in profile.selected_classes
    ]
    return data


def profile_from_dict(data: dict[str, Any]) -> CharacterProfile:
    """
    Creates a CharacterProfile from a snapshot dictionary.

    Missing text fields keep their defaults.

    Args:
        data (dict[str, Any]):
            The snapshot dictionary.

    Returns:
        CharacterProfile:
            The restored profile.

    Raises:
        ValueError: If the snapshot is malformed.

    """
    result = validate_snapshot_data(data)
    if not result.is_valid:
        raise ValueError(f"Invalid character snapshot: {'; '.join(result.errors)}")

    profile = CharacterProfile()
    for field in SheetField:
        if field.snapshot_key in data:
            profile.set_field(field, data[field.snapshot_key])
    profile.selected_classes = [
        ClassSelection.model_validate(selection)
        for selection in data.get("selectedClasses", [])
    ]
    return profile


def load_profile(file_path: Path) -> CharacterProfile | None:
    """
    Loads a character profile from a JSON file.

    Args:
        file_path (Path): The path to the JSON file containing the snapshot.

    Returns:
        CharacterProfile | None: The profile if the file is valid, None otherwise.

    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return profile_from_dict(json.load(f))
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        log_warning(
            f"Failed to load character from {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "character_file_loading",
            },
        )
        return None


def export_profile(profile: CharacterProfile, file_path: Path) -> None:
    """Writes a character profile to a JSON file."""
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(profile_to_dict(profile), f, indent=2, ensure_ascii=False)
