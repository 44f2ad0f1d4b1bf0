# logic/parser/roster_parser.py

"""
Top-level parser: splits user input into a command word and its arguments, and dispatches to
the matching command parser.
"""

from __future__ import annotations

from typing import Callable

from core.exceptions import ParseError
from core.logger import get_logger
from logic.commands.add_assignment_command import AddAssignmentCommand
from logic.commands.add_command import AddCommand
from logic.commands.clear_command import ClearCommand
from logic.commands.command import Command
from logic.commands.delete_assignment_command import DeleteAssignmentCommand
from logic.commands.delete_command import DeleteCommand
from logic.commands.edit_command import EditCommand
from logic.commands.exit_command import ExitCommand
from logic.commands.filter_by_class_group_command import FilterByClassGroupCommand
from logic.commands.help_command import HelpCommand
from logic.commands.list_command import ListCommand
from logic.commands.mark_assignment_command import (
    MarkAssignmentCommand,
    UnmarkAssignmentCommand,
)
from logic.commands.remark_command import RemarkCommand
from logic.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from logic.parser.assignment_parsers import (
    parse_add_assignment_command,
    parse_delete_assignment_command,
    parse_mark_assignment_command,
    parse_unmark_assignment_command,
)
from logic.parser.filter_parser import parse_filter_command
from logic.parser.person_parsers import (
    parse_add_command,
    parse_delete_command,
    parse_edit_command,
    parse_remark_command,
)

logger = get_logger()

COMMAND_CLASSES: list[type[Command]] = [
    AddCommand,
    EditCommand,
    DeleteCommand,
    ListCommand,
    FilterByClassGroupCommand,
    AddAssignmentCommand,
    DeleteAssignmentCommand,
    MarkAssignmentCommand,
    UnmarkAssignmentCommand,
    RemarkCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
]


def _no_arguments(command_class: type[Command]) -> Callable[[str], Command]:
    def parse(args: str) -> Command:
        if args.strip():
            raise ParseError(invalid_format(command_class.MESSAGE_USAGE))
        return command_class()

    return parse


def _parse_help(args: str) -> HelpCommand:
    return HelpCommand([c.MESSAGE_USAGE for c in COMMAND_CLASSES])


PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: parse_add_command,
    EditCommand.COMMAND_WORD: parse_edit_command,
    DeleteCommand.COMMAND_WORD: parse_delete_command,
    ListCommand.COMMAND_WORD: _no_arguments(ListCommand),
    FilterByClassGroupCommand.COMMAND_WORD: parse_filter_command,
    AddAssignmentCommand.COMMAND_WORD: parse_add_assignment_command,
    DeleteAssignmentCommand.COMMAND_WORD: parse_delete_assignment_command,
    MarkAssignmentCommand.COMMAND_WORD: parse_mark_assignment_command,
    UnmarkAssignmentCommand.COMMAND_WORD: parse_unmark_assignment_command,
    RemarkCommand.COMMAND_WORD: parse_remark_command,
    ClearCommand.COMMAND_WORD: _no_arguments(ClearCommand),
    HelpCommand.COMMAND_WORD: _parse_help,
    ExitCommand.COMMAND_WORD: _no_arguments(ExitCommand),
}


def parse_command(user_input: str) -> Command:
    """
    Parses a full line of user input into a `Command`.

    Args:
        user_input (str): The raw line, e.g. "filter c/math-1000,phys-2000".

    Returns:
        Command: A command object ready to execute.

    Raises:
        ParseError:
            - With the help usage if the input is blank.
            - With `MESSAGE_UNKNOWN_COMMAND` if the command word is not recognized.
            - From the command's own parser if its arguments are malformed.

    Notes:
        - Command words are case-sensitive.
        - The command word ends at the first whitespace of any kind. The arguments are passed on
          with a leading space, so a prefix right after the command word is still recognized.
    """
    stripped = user_input.strip()

    if not stripped:
        raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

    command_word, *rest = stripped.split(maxsplit=1)
    args = rest[0] if rest else ""
    parser = PARSERS.get(command_word)

    if parser is None:
        logger.debug(f"Unknown command word: {command_word!r}")
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)

    return parser(" " + args)
