"""
Module for rendering the final character sheet and printing previews of it
and of the class reference table in a formatted way.
"""

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from charsheet.character.character_class import ClassReferenceEntry
from charsheet.character.main import CharacterProfile
from charsheet.core.aggregation import AggregatedSheet
from charsheet.core.constants import STAT_FIELDS, SheetField
from charsheet.core.utils import cprint

# Fields printed before the class summary, in sheet order.
_HEADER_FIELDS = (
    SheetField.NAME,
    SheetField.AGE,
    SheetField.GENDER,
    SheetField.PATRON,
    SheetField.PERSONALITY,
    SheetField.ALIGNMENT,
    SheetField.MORALITY,
    SheetField.RACE,
)


def _line(label: str, value: str) -> str:
    return f"{label}: {value}"


def render_sheet_text(profile: CharacterProfile, sheet: AggregatedSheet) -> str:
    """
    Renders the complete character sheet as plain text.

    Args:
        profile (CharacterProfile): The free-text fields of the character.
        sheet (AggregatedSheet): The content aggregated from the selected classes.

    Returns:
        str: The final sheet text.

    """
    blocks: list[str] = [
        _line(field.display_name, profile.get_field(field)) for field in _HEADER_FIELDS
    ]
    blocks += [
        _line("DND Classes", sheet.dnd_classes),
        _line("Job", profile.job),
        _line("Level", "Matches the Party"),
        _line("Backstory", profile.backstory),
        _line("Gold", profile.gold),
    ]

    stats = ["🌧️", "🔥", "[Stats]"]
    stats += [_line(field.display_name, profile.get_field(field)) for field in STAT_FIELDS]
    blocks.append("\n".join(stats))

    blocks += [
        "🪛\n🪓\n" + _line("Weapons", ", ".join(sheet.weapons)),
        _line("Spells", sheet.spells_line),
        _line("Feat", profile.feat),
        _line("Tools", ", ".join(sheet.tools)),
        _line("Casual Abilities", sheet.casual_line),
        _line("Resistances/Immunities", ", ".join(sheet.resist_immunities)),
        _line("Unique Items", profile.unique_items),
    ]
    return "\n\n".join(blocks) + "\n"


def print_character_sheet(profile: CharacterProfile, sheet: AggregatedSheet) -> None:
    """
    Prints the final character sheet inside a panel.

    The text is wrapped in a Text object, so the "[...]" groups of the sheet
    are never read as console markup.

    Args:
        profile (CharacterProfile): The free-text fields of the character.
        sheet (AggregatedSheet): The content aggregated from the selected classes.

    """
    title = profile.name or "Unnamed character"
    cprint(
        Panel(
            Text(render_sheet_text(profile, sheet)),
            title=f"[bold]{title}[/]",
            subtitle="Final Character Sheet",
            expand=False,
        )
    )


def print_selected_classes(profile: CharacterProfile) -> None:
    """Prints the selected classes with their position in the list."""
    if not profile.selected_classes:
        cprint("  No classes selected.", style="dim")
        return
    for index, selection in enumerate(profile.selected_classes):
        cprint(
            Text(f"  {index}. {selection.class_name} [Level {selection.display_level}]")
        )


def print_class_reference(classes: dict[str, ClassReferenceEntry]) -> None:
    """
    Prints a summary table of the class reference table.

    Args:
        classes (dict[str, ClassReferenceEntry]): The classes to list.

    """
    table = Table(title="Classes", show_lines=False)
    table.add_column("Class", style="bold")
    table.add_column("Weapons")
    table.add_column("Tools")
    table.add_column("Spell tiers")
    table.add_column("Casual unlocks", justify="right")
    for class_name, entry in classes.items():
        table.add_row(
            Text(class_name),
            Text(", ".join(entry.weapons)),
            Text(", ".join(entry.tools)),
            Text(", ".join(entry.spell_chunks) if entry.is_caster else "-"),
            str(len(entry.casual_abilities)),
        )
    cprint(table)
