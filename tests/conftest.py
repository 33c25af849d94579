import pytest
from charsheet.character.character_class import ClassReferenceEntry
from charsheet.character.main import CharacterProfile
from charsheet.core.constants import DEFAULT_DATA_DIR
from charsheet.core.content import ContentRepository
from charsheet.storage.save_store import SaveStore


@pytest.fixture
def reference():
    """A small class reference table."""
    return {
        "wizard": ClassReferenceEntry(
            weapons=["Dagger", "Quarterstaff"],
            tools=["Spellbook"],
            spell_chunks=["1-5", "6-10"],
            casual_abilities={"1": ["Read Magic"], "4-6th": ["Ritual Casting"]},
        ),
        "fighter": ClassReferenceEntry(
            weapons=["Longsword", "Dagger"],
            tools=["Whetstone", "Spellbook"],
            casual_abilities={"1": ["Second Wind"], "2": ["Action Surge"]},
        ),
        "cleric": ClassReferenceEntry(
            weapons=["Mace"],
            resistances_immunities=["Necrotic Resistance"],
            spell_chunks=["1-3rd", "4-9th", "10-20th"],
            casual_abilities={"1": ["Turn Undead"]},
        ),
        "eldritch knight": ClassReferenceEntry(
            resistances_immunities=["Necrotic Resistance", "Force Resistance"],
            spell_chunks=["3-7th", "8-13th"],
        ),
    }


@pytest.fixture
def repo():
    """The content repository, loaded with the bundled data."""
    repository = ContentRepository(DEFAULT_DATA_DIR)
    # Undo any reload done by a previous test.
    repository.reload(DEFAULT_DATA_DIR)
    return repository


@pytest.fixture
def store(tmp_path):
    return SaveStore(tmp_path / "characters.json")


@pytest.fixture
def profile():
    character = CharacterProfile(name="Aria", race="Elf", feat="Alert")
    character.add_class("wizard", 6)
    character.add_class("fighter", 2)
    return character
