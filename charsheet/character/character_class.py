from pydantic import BaseModel, ConfigDict, Field

from charsheet.core.level_range import get_unlocked_abilities, get_unlocked_tiers


class ClassReferenceEntry(BaseModel):
    """
    Represents the unlockable content of a character class as found in the
    reference table. Every field is optional in the source data.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    weapons: list[str] = Field(
        default_factory=list,
        description="Weapons granted by the class.",
    )
    tools: list[str] = Field(
        default_factory=list,
        description="Tools granted by the class.",
    )
    resistances_immunities: list[str] | None = Field(
        default=None,
        description="Resistances and immunities granted by the class, None when absent.",
    )
    spell_chunks: list[str] = Field(
        default_factory=list,
        description="Level-range tokens, one per tier of spell access.",
    )
    casual_abilities: dict[str, list[str]] = Field(
        default_factory=dict,
        description="A dictionary mapping level-range tokens to casual ability names.",
    )

    @property
    def is_caster(self) -> bool:
        """Whether the class defines any spell tier at all."""
        return bool(self.spell_chunks)

    def get_unlocked_spell_chunks(self, level: float) -> list[str]:
        """
        Get the spell tiers unlocked at a specific level.

        Args:
            level (float): The class level of the character.

        Returns:
            list[str]: The unlocked tier tokens, in reference order.

        """
        return get_unlocked_tiers(self.spell_chunks, level)

    def get_unlocked_casual_abilities(self, level: float) -> list[str]:
        """
        Get all casual abilities known up to and including a specific level.

        Args:
            level (float): The class level of the character.

        Returns:
            list[str]: The unlocked ability names.

        """
        return get_unlocked_abilities(self.casual_abilities, level)
