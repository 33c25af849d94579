import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning

from charsheet.character.character_class import ClassReferenceEntry
from charsheet.core.constants import CLASSES_FILENAME
from charsheet.core.utils import Singleton, cprint
from charsheet.core.validation import validate_class_entry_data


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for the class reference table.
    """

    classes: dict[str, ClassReferenceEntry]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing data files to load.

        """
        if data_dir:
            self.reload(data_dir)
            self.loaded = True
        elif not hasattr(self, "loaded"):
            raise ValueError(
                "ContentRepository must be initialized with a valid data_dir on first use."
            )

    def reload(self, root: Path) -> None:
        """
        (Re)load the class reference table from disk.

        Args:
            root (Path):
                The directory containing data files to load.

        """
        self.classes = _load_json_file(
            Path(root) / CLASSES_FILENAME,
            self._load_character_classes,
            "character classes",
        )

    def get_character_class(self, name: str) -> ClassReferenceEntry | None:
        """Get a character class by name, or None if not found."""
        entry = self.classes.get(name)
        if entry is None:
            log_warning(
                f"Class '{name}' not found in ContentRepository.",
                {
                    "class_name": name,
                    "available_classes": list(self.classes.keys()),
                },
            )
        return entry

    def class_names(self) -> list[str]:
        """Get every class name, in reference order."""
        return list(self.classes.keys())

    def suggest_class_names(self, fragment: str) -> list[str]:
        """
        Get the class names containing a fragment, ignoring case.

        Args:
            fragment (str): The partial class name typed so far.

        Returns:
            list[str]: Matching class names, in reference order.

        """
        needle = fragment.lower()
        return [name for name in self.classes if needle in name.lower()]

    @staticmethod
    def _load_character_classes(data: dict[str, Any]) -> dict[str, ClassReferenceEntry]:
        """
        Load character classes from JSON data.

        Args:
            data (dict[str, Any]): Mapping of class names to class data dictionaries.

        Returns:
            dict[str, ClassReferenceEntry]: Dictionary mapping class names to entries.

        Raises:
            ValueError: If a class entry is malformed.

        """
        classes: dict[str, ClassReferenceEntry] = {}
        for class_name, class_data in data.items():
            result = validate_class_entry_data(class_data)
            if not result.is_valid:
                raise ValueError(
                    f"Invalid class '{class_name}': {'; '.join(result.errors)}"
                )
            classes[class_name] = ClassReferenceEntry(**class_data)
        return classes


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[dict[str, Any]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        cprint(
            f"  Loading {description} using {loader_func.__name__}...",
            style="bold green",
        )
        # Validate file path
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        # Load and validate JSON
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data in {filepath}")
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected object in {filepath}, got {type(data).__name__}"
            )
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
