"""
Tests for the character profile and its snapshot format.
"""

import pytest
from charsheet.character.character_serialization import (
    export_profile,
    load_profile,
    profile_from_dict,
    profile_to_dict,
)
from charsheet.character.main import CharacterProfile
from charsheet.character.selection import ClassSelection
from charsheet.core.constants import SheetField
from pydantic import ValidationError


def test_add_and_remove_class(profile):
    assert [s.class_name for s in profile.selected_classes] == ["wizard", "fighter"]

    removed = profile.remove_class(0)

    assert removed == ClassSelection(class_name="wizard", level=6)
    assert [s.class_name for s in profile.selected_classes] == ["fighter"]


def test_add_class_ignores_empty_name():
    character = CharacterProfile()
    assert character.add_class("", 3) is None
    assert character.selected_classes == []


def test_remove_class_out_of_range(profile):
    with pytest.raises(IndexError):
        profile.remove_class(5)


def test_selection_is_frozen():
    selection = ClassSelection(class_name="wizard", level=2)
    with pytest.raises(ValidationError):
        selection.level = 3


def test_reset_gives_blank_profile(profile):
    blank = CharacterProfile.reset()
    assert blank.name == ""
    assert blank.age == "ADULT"
    assert blank.selected_classes == []
    # The edited profile is untouched.
    assert profile.name == "Aria"


def test_sheet_field_lookup():
    assert SheetField.from_string("uniqueItems") is SheetField.UNIQUE_ITEMS
    assert SheetField.from_string("Unique Items") is SheetField.UNIQUE_ITEMS
    assert SheetField.from_string("ac") is SheetField.AC
    with pytest.raises(ValueError):
        SheetField.from_string("mana")


def test_profile_to_dict_uses_snapshot_keys(profile):
    data = profile_to_dict(profile)

    assert data["name"] == "Aria"
    assert data["uniqueItems"] == ""
    assert data["selectedClasses"] == [
        {"className": "wizard", "level": 6},
        {"className": "fighter", "level": 2},
    ]
    assert "unique_items" not in data


def test_profile_from_dict(profile):
    restored = profile_from_dict(profile_to_dict(profile))
    assert restored == profile


def test_profile_from_partial_dict():
    """Test that missing fields keep their defaults."""
    restored = profile_from_dict({"name": "Bram"})
    assert restored.name == "Bram"
    assert restored.age == "ADULT"
    assert restored.selected_classes == []


def test_profile_from_invalid_dict():
    with pytest.raises(ValueError, match="Invalid character snapshot"):
        profile_from_dict({"selectedClasses": [{"className": "wizard", "level": 99}]})


def test_export_and_load_profile(profile, tmp_path):
    path = tmp_path / "aria.json"
    export_profile(profile, path)
    assert load_profile(path) == profile


def test_load_profile_missing_file(tmp_path, mocker):
    mock_log_warning = mocker.patch(
        "charsheet.character.character_serialization.log_warning"
    )
    assert load_profile(tmp_path / "missing.json") is None
    mock_log_warning.assert_called_once()
