"""
User interface module for the character sheet creator.

Provides the console front-end of the character form: commands to pick
classes, fill in the free-text fields, save and load named snapshots and
preview the final sheet, with prompt_toolkit handling the input line.
"""

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from rich.table import Table
from rich.text import Text

from charsheet.character.main import CharacterProfile
from charsheet.core.aggregation import AggregatedSheet, build_character_sheet
from charsheet.core.constants import SheetField
from charsheet.core.content import ContentRepository
from charsheet.core.sheets import (
    print_character_sheet,
    print_class_reference,
    print_selected_classes,
)
from charsheet.core.utils import cprint, crule
from charsheet.core.validation import validate_selection_data
from charsheet.storage.save_store import SaveNotFoundError, SaveStore

COMMANDS: dict[str, str] = {
    "add": "add <class> [level]      add a class (level defaults to 1)",
    "remove": "remove <index>           remove the selected class at <index>",
    "list": "list                     list the selected classes",
    "set": "set <field> <value>      fill in a sheet field",
    "fields": "fields                   list the sheet fields",
    "classes": "classes [text]           list classes, filtered by text",
    "show": "show                     print the final character sheet",
    "save": "save <name>              save the character under <name>",
    "load": "load <name>              load the character saved as <name>",
    "saves": "saves                    list the saved characters",
    "delete": "delete <name>            delete the character saved as <name>",
    "reset": "reset                    clear every field (saves are kept)",
    "help": "help                     show this help",
    "quit": "quit                     leave the sheet creator",
}


class SheetCLI:
    """
    Command-line front-end of the character sheet creator.

    Attributes:
        repo (ContentRepository):
            The class reference table.
        store (SaveStore):
            The named snapshot store.
        profile (CharacterProfile):
            The character being edited.

    """

    def __init__(
        self,
        repo: ContentRepository,
        store: SaveStore,
        profile: CharacterProfile | None = None,
    ) -> None:
        self.repo = repo
        self.store = store
        self.profile = profile or CharacterProfile()
        self._session: PromptSession | None = None

    @property
    def sheet(self) -> AggregatedSheet:
        """The sheet content, recomputed from the current selections."""
        return build_character_sheet(self.profile.selected_classes, self.repo.classes)

    def make_completer(self) -> WordCompleter:
        words = [*COMMANDS, *self.repo.class_names(), *(f.value for f in SheetField)]
        return WordCompleter(words, ignore_case=True, sentence=True)

    def run(self) -> None:
        """Reads and executes commands until the user quits."""
        if self._session is None:
            self._session = PromptSession(completer=self.make_completer())
        crule("Character Sheet Creator", style="bold green")
        cprint("Type [bold]help[/] for the list of commands.")
        while True:
            try:
                line = self._session.prompt("sheet > ")
            except (KeyboardInterrupt, EOFError):
                break
            if not self.handle_command(line):
                break
        crule("Goodbye", style="bold green")

    def handle_command(self, line: str) -> bool:
        """
        Executes one command line.

        Args:
            line (str): The text typed by the user.

        Returns:
            bool: False when the user asked to quit, True otherwise.

        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return True
        command = parts[0].lower()
        argument = parts[1].strip() if len(parts) > 1 else ""

        if command in ("quit", "exit", "q"):
            return False
        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            cprint(f"Unknown command '{command}'. Type help for the list.", style="red")
            return True
        handler(argument)
        return True

    # === Classes ===

    def _cmd_add(self, argument: str) -> None:
        words = argument.split()
        level = 1
        if len(words) > 1 and words[-1].lstrip("-").isdigit():
            level = int(words.pop())
        class_name = " ".join(words)

        result = validate_selection_data({"className": class_name, "level": level})
        if not result.is_valid:
            for error in result.errors:
                cprint(f"  {error}", style="red")
            return
        if class_name not in self.repo.classes:
            suggestions = self.repo.suggest_class_names(class_name)
            hint = f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""
            cprint(
                Text(f"  '{class_name}' is not a known class and will be ignored.{hint}"),
                style="yellow",
            )
        self.profile.add_class(class_name, level)
        print_selected_classes(self.profile)

    def _cmd_remove(self, argument: str) -> None:
        try:
            removed = self.profile.remove_class(int(argument))
        except ValueError:
            cprint("  Usage: remove <index>", style="red")
            return
        except IndexError as e:
            cprint(f"  {e}", style="red")
            return
        cprint(Text(f"  Removed {removed.class_name} [Level {removed.display_level}]"))
        print_selected_classes(self.profile)

    def _cmd_list(self, _: str) -> None:
        print_selected_classes(self.profile)

    def _cmd_classes(self, argument: str) -> None:
        names = self.repo.suggest_class_names(argument)
        print_class_reference({name: self.repo.classes[name] for name in names})

    # === Fields ===

    def _cmd_set(self, argument: str) -> None:
        parts = argument.split(maxsplit=1)
        if not parts:
            cprint("  Usage: set <field> <value>", style="red")
            return
        try:
            field = SheetField.from_string(parts[0])
        except ValueError as e:
            cprint(f"  {e}", style="red")
            return
        value = parts[1] if len(parts) > 1 else ""
        self.profile.set_field(field, value)
        cprint(Text(f"  {field.display_name}: {value}"))

    def _cmd_fields(self, _: str) -> None:
        table = Table(title="Sheet fields")
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for field in SheetField:
            table.add_row(field.value, Text(self.profile.get_field(field)))
        cprint(table)

    def _cmd_show(self, _: str) -> None:
        print_character_sheet(self.profile, self.sheet)

    # === Saves ===

    def _cmd_save(self, save_name: str) -> None:
        try:
            self.store.save(save_name, self.profile)
        except ValueError as e:
            cprint(f"  {e}", style="red")
            return
        cprint(Text(f'  Character saved as "{save_name}"!'), style="green")

    def _cmd_load(self, save_name: str) -> None:
        try:
            self.profile = self.store.load(save_name)
        except (SaveNotFoundError, ValueError) as e:
            cprint(Text(f"  {e}"), style="red")
            return
        cprint(Text(f'  Loaded character: "{save_name}"'), style="green")

    def _cmd_saves(self, _: str) -> None:
        names = self.store.list_saves()
        if not names:
            cprint("  No saves found.", style="dim")
            return
        for name in names:
            cprint(Text(f"  {name}"))

    def _cmd_delete(self, save_name: str) -> None:
        try:
            self.store.delete(save_name)
        except SaveNotFoundError as e:
            cprint(Text(f"  {e}"), style="red")
            return
        cprint(Text(f'  Deleted "{save_name}"'), style="green")

    def _cmd_reset(self, _: str) -> None:
        self.profile = CharacterProfile.reset()
        cprint("  All fields reset (not removed from storage).", style="green")

    def _cmd_help(self, _: str) -> None:
        for usage in COMMANDS.values():
            cprint(Text(f"  {usage}"))
