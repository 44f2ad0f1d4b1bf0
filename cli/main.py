# cli/main.py

"""
Interactive shell for the Roster Manager.

Loads the roster from disk, then reads one command per line until `exit` (or end of input).
Every command's outcome is printed; after commands that change the view or the roster, the
currently displayed student list is printed with the indices that later commands refer to.
"""

import argparse
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.config as config
from cli.path_utils import resolve_data_file
from core.logger import get_logger
from logic.commands.command import CommandResult
from logic.commands.filter_by_class_group_command import FilterByClassGroupCommand
from logic.commands.list_command import ListCommand
from logic.logic_manager import LogicManager
from models.model import Model
from models.roster import Roster

logger = get_logger()

LIST_COMMAND_WORDS = (ListCommand.COMMAND_WORD, FilterByClassGroupCommand.COMMAND_WORD)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Manage a class roster of students, class groups, and assignments.",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help=f"roster .json file (default: {config.DATA_FILE})",
    )
    return parser


def load_roster(data_file: str) -> Roster | None:
    """
    Loads the roster at `data_file`.

    Returns:
        Roster: The loaded roster, or an empty one if the user chooses to start over after a failed load.
        None: If the load failed and the user declined to start with an empty roster.
    """
    print("\nLoading Roster ...")

    roster_response = Roster.load(data_file)

    if roster_response.success:
        roster = cast(Roster, roster_response.data["roster"])
        print(f"... {len(roster)} student(s) loaded from {data_file}.")
        return roster

    helpers.display_response_failure(roster_response)
    logger.warning(f"Failed to load roster from {data_file}: {roster_response.detail}")

    if helpers.confirm_action(
        "Start with an empty roster? Saving will overwrite the existing file."
    ):
        return Roster()

    return None


def display_filtered_persons(logic: LogicManager) -> None:
    persons = logic.filtered_persons

    if not persons:
        print("\n[NO STUDENTS TO DISPLAY]")
        return

    print()
    helpers.display_results(
        persons, show_index=True, formatter=model_formatters.format_person_multiline
    )


def display_class_groups(roster: Roster) -> None:
    class_groups = roster.class_groups()

    if class_groups:
        print("\nClass groups:")
        helpers.display_results(
            class_groups, formatter=model_formatters.format_class_group_oneline
        )

    for first, second in roster.class_group_clashes():
        print(f"[WARNING] {model_formatters.format_class_group_clash(first, second)}")


def run_cli(argv: list[str] | None = None) -> None:
    """
    Top-level loop for the Roster Manager shell.

    Args:
        argv (list[str] | None): Command-line arguments, defaulting to `sys.argv[1:]`.

    Raises:
        SystemExit: Always raised on exit, through `exit_program()`.
    """
    args = build_arg_parser().parse_args(argv)
    data_file = resolve_data_file(args.data_file, config.DATA_FILE)

    helpers.display_banner("ROSTER MANAGER")

    roster = load_roster(data_file)

    if roster is None:
        exit_program()

    roster = cast(Roster, roster)
    logic = LogicManager(Model(roster), data_file)

    display_class_groups(roster)
    print("\nType 'help' to see all commands.")

    while True:
        try:
            command_text = helpers.prompt_command()

        except (EOFError, KeyboardInterrupt):
            exit_program()

        if not command_text:
            continue

        response = logic.execute(command_text)

        if not response.success:
            helpers.display_response_failure(response)
            continue

        helpers.display_response_success(response)

        result = cast(CommandResult, response.data["result"])

        if result.exit:
            exit_program()

        if result.mutated or command_text.split()[0] in LIST_COMMAND_WORDS:
            display_filtered_persons(logic)


def exit_program():
    """
    Displays an exit banner and terminates the shell.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - The roster is saved after every change, so there is nothing left to write here.
    """
    helpers.display_banner("Exiting Program")
    print()

    raise SystemExit


if __name__ == "__main__":
    run_cli()
