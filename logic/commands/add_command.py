# logic/commands/add_command.py

from core.exceptions import CommandError
from logic.commands.command import Command, CommandResult
from logic.messages import MESSAGE_DUPLICATE_PERSON, format_person
from logic.parser.cli_syntax import (
    PREFIX_ASSIGNMENT,
    PREFIX_CLASS_GROUP,
    PREFIX_LEVEL,
    PREFIX_NAME,
    PREFIX_PHONE,
)
from models.model import Model
from models.person import Person


class AddCommand(Command):
    """Adds a student to the roster."""

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a student to the roster. "
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_PHONE}PHONE {PREFIX_LEVEL}LEVEL "
        f"[{PREFIX_CLASS_GROUP}CLASS_GROUP]... [{PREFIX_ASSIGNMENT}ASSIGNMENT]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_PHONE}98765432 "
        f"{PREFIX_LEVEL}Sec 3 {PREFIX_CLASS_GROUP}math-1000"
    )
    MESSAGE_SUCCESS = "New student added: {}"

    def __init__(self, person: Person):
        self._person = person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self._person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)

        model.add_person(self._person)

        return CommandResult(
            AddCommand.MESSAGE_SUCCESS.format(format_person(self._person)),
            mutated=True,
        )
