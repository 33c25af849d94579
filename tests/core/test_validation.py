"""
Tests for the validation layer used in front of the aggregation engine.
"""

import pytest
from charsheet.core.validation import (
    validate_class_entry_data,
    validate_selection_data,
    validate_snapshot_data,
)


def test_valid_selection():
    assert validate_selection_data({"className": "wizard", "level": 3}).is_valid


@pytest.mark.parametrize(
    "data",
    [
        {"className": "", "level": 3},
        {"className": "wizard", "level": 0},
        {"className": "wizard", "level": 31},
        {"className": "wizard", "level": "3"},
        {"className": "wizard", "level": True},
        {"level": 3},
    ],
)
def test_invalid_selection(data):
    result = validate_selection_data(data)
    assert not result.is_valid
    assert result.errors


def test_class_entry_shapes():
    """Test that each optional field of a class entry is type checked."""
    assert validate_class_entry_data({}).is_valid
    assert validate_class_entry_data(
        {"weapons": ["Dagger"], "casual_abilities": {"1": ["Read Magic"]}}
    ).is_valid

    result = validate_class_entry_data({"spell_chunks": ["1-5", 6]})
    assert result.errors == ["Field 'spell_chunks[1]' must be of type str"]

    result = validate_class_entry_data({"casual_abilities": {"1": "Read Magic"}})
    assert result.errors == ["Field 'casual_abilities.1' must be of type list"]

    assert not validate_class_entry_data(["weapons"]).is_valid


def test_snapshot_validation():
    assert validate_snapshot_data(
        {"name": "Aria", "selectedClasses": [{"className": "wizard", "level": 2}]}
    ).is_valid
    assert not validate_snapshot_data({"uniqueItems": 3}).is_valid
    assert not validate_snapshot_data(
        {"selectedClasses": [{"className": "wizard", "level": 0}]}
    ).is_valid
    assert not validate_snapshot_data("Aria").is_valid
