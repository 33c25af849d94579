"""
Main entry point for the character sheet creator.

This script loads the class reference table, opens the snapshot store and
starts the interactive character form. With --sheet it instead prints the
sheet of a saved character and exits.
"""

import argparse
import logging
from pathlib import Path

from charsheet.core.constants import get_data_dir, get_save_file
from charsheet.core.content import ContentRepository
from charsheet.core.logging import get_logger, setup_logging
from charsheet.core.sheets import print_character_sheet
from charsheet.core.utils import cprint, crule
from charsheet.storage.save_store import SaveNotFoundError, SaveStore
from charsheet.ui.cli_interface import SheetCLI

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charsheet",
        description="Build a tabletop character sheet from classes and levels.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory holding classes.json (default: bundled data)",
    )
    parser.add_argument(
        "--save-file",
        type=Path,
        default=None,
        help="JSON file holding the named characters",
    )
    parser.add_argument(
        "--sheet",
        metavar="NAME",
        default=None,
        help="print the sheet of a saved character and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    data_dir = args.data_dir or get_data_dir()
    save_file = args.save_file or get_save_file()
    logger.debug("Using data directory %s and save file %s", data_dir, save_file)

    crule("Initialize Data", style="bold green")
    try:
        repo = ContentRepository(data_dir)
    except ValueError as e:
        logger.error(str(e))
        return 1
    store = SaveStore(save_file)

    if args.sheet is not None:
        try:
            profile = store.load(args.sheet)
        except (SaveNotFoundError, ValueError) as e:
            cprint(f"{e}", style="bold red", markup=False)
            return 1
        cli = SheetCLI(repo, store, profile)
        print_character_sheet(cli.profile, cli.sheet)
        return 0

    SheetCLI(repo, store).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
