# logic/commands/help_command.py

from logic.commands.command import Command, CommandResult
from models.model import Model


class HelpCommand(Command):
    """Shows the usage of every command."""

    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"

    def __init__(self, usages: list[str]):
        self._usages = list(usages)

    def execute(self, model: Model) -> CommandResult:
        return CommandResult("\n\n".join(self._usages), show_help=True)
