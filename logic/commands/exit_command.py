# logic/commands/exit_command.py

from logic.commands.command import Command, CommandResult
from models.model import Model


class ExitCommand(Command):

    COMMAND_WORD = "exit"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Saves the roster and exits the program.\nExample: {COMMAND_WORD}"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Roster Manager as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(ExitCommand.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
