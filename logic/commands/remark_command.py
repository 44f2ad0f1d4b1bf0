# logic/commands/remark_command.py

from __future__ import annotations

from logic.commands.command import Command, CommandResult
from logic.messages import format_person
from logic.parser.cli_syntax import PREFIX_REMARK
from models.fields import Remark
from models.model import Model


class RemarkCommand(Command):
    """Sets the remark of a student, or removes it when no remark is given."""

    COMMAND_WORD = "remark"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the remark of the student identified by the index number used in the "
        "displayed list. Existing remarks will be overwritten; an empty remark removes it.\n"
        f"Parameters: INDEX {PREFIX_REMARK}[REMARK]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_REMARK}Needs help w/ algebra"
    )
    MESSAGE_ADD_SUCCESS = "Added remark to Student: {}"
    MESSAGE_DELETE_SUCCESS = "Removed remark from Student: {}"

    def __init__(self, index: int, remark: Remark | None):
        self._index = index
        self._remark = remark

    def execute(self, model: Model) -> CommandResult:
        person = self.get_target(model, self._index)
        edited = person.replace(remark=self._remark)
        model.set_person(person, edited)

        message = (
            RemarkCommand.MESSAGE_ADD_SUCCESS
            if self._remark is not None
            else RemarkCommand.MESSAGE_DELETE_SUCCESS
        )

        return CommandResult(message.format(format_person(edited)), mutated=True)
