# logic/commands/delete_command.py

from logic.commands.command import Command, CommandResult
from logic.messages import format_person
from models.model import Model


class DeleteCommand(Command):
    """Deletes the student at the given index of the displayed list."""

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the student identified by the index number used in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS = "Deleted Student: {}"

    def __init__(self, index: int):
        self._index = index

    def execute(self, model: Model) -> CommandResult:
        person = self.get_target(model, self._index)
        model.delete_person(person)

        return CommandResult(
            DeleteCommand.MESSAGE_SUCCESS.format(format_person(person)),
            mutated=True,
        )
