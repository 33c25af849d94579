from pydantic import BaseModel, ConfigDict, Field

from charsheet.core.level_range import format_level


class ClassSelection(BaseModel):
    """
    A class picked by the player together with the level taken in it.

    The level is expected to be a positive integer but is not enforced here,
    odd values simply unlock nothing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str = Field(
        alias="className",
        description="Key of the class in the reference table.",
    )
    level: int | float = Field(
        description="Level taken in the class.",
    )

    @property
    def display_level(self) -> str:
        return format_level(self.level)
