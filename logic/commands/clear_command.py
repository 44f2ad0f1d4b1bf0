# logic/commands/clear_command.py

from logic.commands.command import Command, CommandResult
from models.model import Model


class ClearCommand(Command):
    """Removes every student from the roster."""

    COMMAND_WORD = "clear"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Clears all students from the roster.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Roster has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.clear()
        model.show_all()
        return CommandResult(ClearCommand.MESSAGE_SUCCESS, mutated=True)
