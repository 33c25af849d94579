"""
Named character snapshots stored in a single JSON file.

The file holds one object, {"myDndCharacters": {<save name>: <snapshot>}},
and every save overwrites the snapshot stored under the same name.
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning

from charsheet.character.character_serialization import (
    profile_from_dict,
    profile_to_dict,
)
from charsheet.character.main import CharacterProfile
from charsheet.core.constants import SAVES_ROOT_KEY


class SaveNotFoundError(KeyError):
    """Raised when loading or deleting a save name that does not exist."""

    def __init__(self, save_name: str) -> None:
        super().__init__(save_name)
        self.save_name = save_name

    def __str__(self) -> str:
        return f'No saved data found for "{self.save_name}".'


class SaveStore:
    """
    Keeps named snapshots of character profiles.

    Attributes:
        path (Path):
            The JSON file holding every snapshot.

    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Save file {self.path} is not valid JSON: {e}") from e
        saves = data.get(SAVES_ROOT_KEY, {}) if isinstance(data, dict) else None
        if not isinstance(saves, dict):
            raise ValueError(
                f"Save file {self.path} has no '{SAVES_ROOT_KEY}' object"
            )
        return saves

    def _write_all(self, saves: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({SAVES_ROOT_KEY: saves}, f, indent=2, ensure_ascii=False)

    def list_saves(self) -> list[str]:
        """Returns the stored save names, in the order they were first saved."""
        return list(self._read_all().keys())

    def save(self, save_name: str, profile: CharacterProfile) -> None:
        """
        Stores a profile under a name, replacing any snapshot with that name.

        Raises:
            ValueError: If the save name is empty.

        """
        if not save_name or not save_name.strip():
            raise ValueError("Please provide a save name first.")
        saves = self._read_all()
        saves[save_name] = profile_to_dict(profile)
        self._write_all(saves)

    def load(self, save_name: str) -> CharacterProfile:
        """
        Restores the profile stored under a name.

        Raises:
            ValueError: If the save name is empty or the snapshot is malformed.
            SaveNotFoundError: If nothing is stored under that name.

        """
        if not save_name:
            raise ValueError("No save selected.")
        saves = self._read_all()
        if save_name not in saves:
            log_warning(
                f"Save '{save_name}' not found",
                {
                    "save_name": save_name,
                    "available_saves": list(saves.keys()),
                    "context": "save_loading",
                },
            )
            raise SaveNotFoundError(save_name)
        return profile_from_dict(saves[save_name])

    def delete(self, save_name: str) -> None:
        """
        Removes the snapshot stored under a name.

        Raises:
            SaveNotFoundError: If nothing is stored under that name.

        """
        saves = self._read_all()
        if save_name not in saves:
            raise SaveNotFoundError(save_name)
        del saves[save_name]
        self._write_all(saves)
