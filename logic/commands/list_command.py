# logic/commands/list_command.py

from logic.commands.command import Command, CommandResult
from models.model import Model


class ListCommand(Command):
    """Lists every student in the roster."""

    COMMAND_WORD = "list"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all students.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Listed all students"

    def execute(self, model: Model) -> CommandResult:
        model.show_all()
        return CommandResult(ListCommand.MESSAGE_SUCCESS)
