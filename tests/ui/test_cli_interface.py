"""
Tests for the command-line front-end.
"""

import pytest
from charsheet.ui.cli_interface import SheetCLI


@pytest.fixture
def cli(repo, store):
    return SheetCLI(repo, store)


def test_add_class_with_level(cli):
    assert cli.handle_command("add eldritch knight 5")
    selection = cli.profile.selected_classes[0]
    assert selection.class_name == "eldritch knight"
    assert selection.level == 5


def test_add_class_defaults_to_level_one(cli):
    cli.handle_command("add wizard")
    assert cli.profile.selected_classes[0].level == 1


@pytest.mark.parametrize("line", ["add", "add wizard 0", "add wizard 31"])
def test_add_class_rejects_invalid_input(cli, line):
    cli.handle_command(line)
    assert cli.profile.selected_classes == []


def test_unknown_class_is_added_but_ignored(cli):
    """Test that typed names are kept even when the engine will skip them."""
    cli.handle_command("add necromancer 3")
    cli.handle_command("add wizard 3")

    assert len(cli.profile.selected_classes) == 2
    assert cli.sheet.dnd_classes == "Wizard [3]"


def test_remove_class(cli):
    cli.handle_command("add wizard 3")
    cli.handle_command("add fighter 2")
    cli.handle_command("remove 0")
    assert [s.class_name for s in cli.profile.selected_classes] == ["fighter"]

    cli.handle_command("remove 9")
    cli.handle_command("remove first")
    assert len(cli.profile.selected_classes) == 1


def test_sheet_is_recomputed(cli):
    cli.handle_command("add wizard 7")
    assert cli.sheet.spells_line == "[1-10th Wizard]"
    cli.handle_command("add cleric 3")
    assert cli.sheet.spells_line == "[1-10th Wizard], [1-3th Cleric]"


def test_set_field(cli):
    cli.handle_command("set name Aria of the Vale")
    cli.handle_command("set uniqueItems Moonblade")
    cli.handle_command("set mana 12")

    assert cli.profile.name == "Aria of the Vale"
    assert cli.profile.unique_items == "Moonblade"


def test_save_load_and_reset(cli):
    cli.handle_command("set name Aria")
    cli.handle_command("add rogue 4")
    cli.handle_command("save aria")

    cli.handle_command("reset")
    assert cli.profile.name == ""
    assert cli.profile.selected_classes == []
    assert cli.store.list_saves() == ["aria"]

    cli.handle_command("load aria")
    assert cli.profile.name == "Aria"
    assert cli.profile.selected_classes[0].class_name == "rogue"


def test_load_unknown_save_keeps_profile(cli):
    cli.handle_command("set name Aria")
    cli.handle_command("load bram")
    assert cli.profile.name == "Aria"


def test_show_prints_sheet(cli, capsys):
    cli.handle_command("add fighter 5")
    cli.handle_command("show")
    out = capsys.readouterr().out
    assert "DND Classes: Fighter [5]" in out
    assert "[Second Wind, Action Surge, Extra Attack]" in out


@pytest.mark.parametrize("line", ["", "help", "classes kni", "saves", "list", "fields", "bogus"])
def test_commands_keep_running(cli, line):
    assert cli.handle_command(line) is True


@pytest.mark.parametrize("line", ["quit", "exit", "q"])
def test_quit(cli, line):
    assert cli.handle_command(line) is False


def test_completer_knows_classes(cli):
    completer = cli.make_completer()
    assert "eldritch knight" in completer.words
    assert "add" in completer.words
