"""
Character profile module.

Defines the CharacterProfile, the full state of the character form: the
free-text fields written by the player and the ordered list of selected
classes that feeds the aggregation engine.
"""

from pydantic import BaseModel, Field

from charsheet.core.constants import DEFAULT_AGE, SheetField

from .selection import ClassSelection


class CharacterProfile(BaseModel):
    """
    Represents everything the player typed into the character form.

    Attributes:
        selected_classes (list[ClassSelection]):
            The classes picked so far, in the order they were added.

    All the other attributes are free text and are listed by SheetField.

    """

    name: str = ""
    age: str = DEFAULT_AGE
    gender: str = ""
    patron: str = ""
    personality: str = ""
    alignment: str = ""
    morality: str = ""
    race: str = ""
    job: str = ""
    backstory: str = ""
    gold: str = ""

    # === Stats ===

    strength: str = ""
    intelligence: str = ""
    charisma: str = ""
    wisdom: str = ""
    constitution: str = ""
    dexterity: str = ""
    ac: str = ""
    stealth: str = ""
    intimidation: str = ""
    investigation: str = ""
    hp: str = ""
    speed: str = ""
    modifier: str = ""

    # === Feat / Unique items ===

    feat: str = ""
    unique_items: str = ""

    selected_classes: list[ClassSelection] = Field(
        default_factory=list,
        description="The selected classes, in the order they were added.",
    )

    def get_field(self, field: SheetField) -> str:
        return getattr(self, field.value)

    def set_field(self, field: SheetField, value: str) -> None:
        setattr(self, field.value, value)

    def add_class(self, class_name: str, level: int) -> ClassSelection | None:
        """
        Adds a class selection at the end of the list.

        Args:
            class_name (str): The key of the class in the reference table.
            level (int): The level taken in the class.

        Returns:
            ClassSelection | None: The new selection, or None when the class
                name is empty.

        """
        if not class_name:
            return None
        selection = ClassSelection(class_name=class_name, level=level)
        self.selected_classes.append(selection)
        return selection

    def remove_class(self, index: int) -> ClassSelection:
        """
        Removes the class selection at the given position.

        Raises:
            IndexError: If there is no selection at that position.

        """
        if not 0 <= index < len(self.selected_classes):
            raise IndexError(f"No class selected at position {index}")
        return self.selected_classes.pop(index)

    @staticmethod
    def reset() -> "CharacterProfile":
        """Returns a blank profile, as shown when the form is reset."""
        return CharacterProfile()
