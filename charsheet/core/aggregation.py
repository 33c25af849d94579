"""
Aggregation engine for the character sheet.

Turns an ordered list of class selections and the class reference table into
the merged content of the sheet: class summary, weapons, tools,
resistances/immunities, spell access per class and casual abilities per
class. The engine is a pure function of its inputs and never raises for
unknown classes or unreadable level tokens, those simply contribute nothing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from catchery import log_debug
from pydantic import BaseModel, Field

from charsheet.core.level_range import combine_level_ranges
from charsheet.core.utils import make_unique, title_case

if TYPE_CHECKING:
    from charsheet.character.character_class import ClassReferenceEntry
    from charsheet.character.selection import ClassSelection


class ClassSpellState(BaseModel):
    """Spell access of one selected class."""

    class_title: str = Field(
        description="Display title of the class.",
    )
    is_all: bool = Field(
        description="Whether every spell tier of the class is unlocked.",
    )
    unlocked_chunks: list[str] = Field(
        default_factory=list,
        description="The unlocked tier tokens, in reference order.",
    )

    def display(self) -> str:
        """
        Renders the spell access of the class for the spells line.

        Returns:
            str: "[All of <Class>]", "[<range> <Class>]" or an empty string
                when nothing is unlocked.

        """
        if self.is_all:
            return f"[All of {self.class_title}]"
        if not self.unlocked_chunks:
            return ""
        return f"[{combine_level_ranges(self.unlocked_chunks)} {self.class_title}]"


class ClassCasualAbilities(BaseModel):
    """Casual abilities unlocked by one selected class."""

    class_title: str = Field(
        description="Display title of the class.",
    )
    abilities: list[str] = Field(
        default_factory=list,
        description="Unlocked ability names, not deduplicated.",
    )

    def display(self) -> str:
        if not self.abilities:
            return ""
        return f"[{', '.join(self.abilities)}]"


class AggregatedSheet(BaseModel):
    """Content derived from the selected classes."""

    dnd_classes: str = Field(
        default="",
        description='Comma-joined "<Title> [<level>]" per known selection.',
    )
    weapons: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    resist_immunities: list[str] = Field(default_factory=list)
    spells_by_class: list[ClassSpellState] = Field(default_factory=list)
    casual_by_class: list[ClassCasualAbilities] = Field(default_factory=list)

    @property
    def spells_line(self) -> str:
        """The spell access of every class, joined for the sheet."""
        return _join_displays(state.display() for state in self.spells_by_class)

    @property
    def casual_line(self) -> str:
        """The casual abilities of every class, joined for the sheet."""
        return _join_displays(entry.display() for entry in self.casual_by_class)


def _join_displays(displays: Iterable[str]) -> str:
    return ", ".join(display for display in displays if display)


def compute_spell_state(
    class_title: str, entry: ClassReferenceEntry, level: float
) -> ClassSpellState:
    """
    Computes the spell access of a class at a level.

    A class without spell tiers counts as having all of them, so non-casters
    still render as "[All of <Class>]".

    Args:
        class_title (str): Display title of the class.
        entry (ClassReferenceEntry): The reference content of the class.
        level (float): The class level of the character.

    Returns:
        ClassSpellState: The spell access of the class.

    """
    all_tiers = entry.spell_chunks
    unlocked = entry.get_unlocked_spell_chunks(level)
    is_all = (len(unlocked) == len(all_tiers) and len(all_tiers) > 0) or (
        len(all_tiers) == 0
    )
    return ClassSpellState(
        class_title=class_title,
        is_all=is_all,
        unlocked_chunks=unlocked,
    )


class _SheetBuilder:
    """Accumulates per-class results for a single aggregation."""

    def __init__(self) -> None:
        self.dnd_classes: list[str] = []
        self.weapons: list[str] = []
        self.tools: list[str] = []
        self.resist_immunities: list[str] = []
        self.spells_by_class: list[ClassSpellState] = []
        self.casual_by_class: list[ClassCasualAbilities] = []

    def add_class(self, selection: ClassSelection, entry: ClassReferenceEntry) -> None:
        class_title = title_case(selection.class_name)
        self.dnd_classes.append(f"{class_title} [{selection.display_level}]")

        self.weapons.extend(entry.weapons)
        self.tools.extend(entry.tools)

        # Resistances/immunities are tagged with a class header, even an empty list gets one.
        if entry.resistances_immunities is not None:
            self.resist_immunities.append(f"{class_title} R/I:")
            self.resist_immunities.extend(entry.resistances_immunities)

        self.spells_by_class.append(
            compute_spell_state(class_title, entry, selection.level)
        )
        self.casual_by_class.append(
            ClassCasualAbilities(
                class_title=class_title,
                abilities=entry.get_unlocked_casual_abilities(selection.level),
            )
        )

    def build(self) -> AggregatedSheet:
        return AggregatedSheet(
            dnd_classes=", ".join(self.dnd_classes),
            weapons=make_unique(self.weapons),
            tools=make_unique(self.tools),
            resist_immunities=make_unique(self.resist_immunities),
            spells_by_class=self.spells_by_class,
            casual_by_class=self.casual_by_class,
        )


def build_character_sheet(
    selections: Iterable[ClassSelection],
    reference: Mapping[str, ClassReferenceEntry],
) -> AggregatedSheet:
    """
    Aggregates the selected classes into the content of the sheet.

    Selections are processed in order. A class name that is not a key of the
    reference table (exact, case-sensitive match) is skipped and does not
    even appear in the class summary.

    Args:
        selections (Iterable[ClassSelection]): The selected classes and levels.
        reference (Mapping[str, ClassReferenceEntry]): The class reference table.

    Returns:
        AggregatedSheet: The merged, deduplicated sheet content.

    """
    builder = _SheetBuilder()
    for selection in selections:
        entry = reference.get(selection.class_name)
        if entry is None:
            log_debug(
                f"Skipping unknown class '{selection.class_name}'",
                {"class_name": selection.class_name, "context": "sheet_aggregation"},
            )
            continue
        builder.add_class(selection, entry)
    return builder.build()
