# logic/commands/delete_assignment_command.py

from __future__ import annotations

from typing import Iterable

from core.exceptions import CommandError
from logic.commands.command import Command, CommandResult
from logic.messages import format_person
from logic.parser.cli_syntax import PREFIX_ASSIGNMENT
from models.assignment import Assignment
from models.model import Model


class DeleteAssignmentDescriptor:
    """Stores the assignments to remove from a student."""

    def __init__(self, assignments: Iterable[Assignment] | None = None):
        self.assignments: frozenset[Assignment] | None = (
            frozenset(assignments) if assignments is not None else None
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeleteAssignmentDescriptor):
            return NotImplemented
        return self.assignments == other.assignments

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = sorted(a.name for a in self.assignments or ())
        return f"DeleteAssignmentDescriptor(assignments={names})"


class DeleteAssignmentCommand(Command):
    """
    Removes one or more assignments from a single student.

    Deletion is all or nothing: if any requested assignment is missing, nothing is removed and
    the error names the first missing assignment in name order.
    """

    COMMAND_WORD = "deleteassign"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes assignments from the student identified by the index number used in "
        "the displayed list.\n"
        f"Parameters: INDEX {PREFIX_ASSIGNMENT}ASSIGNMENT[,ASSIGNMENT]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_ASSIGNMENT}Homework1"
    )
    MESSAGE_SUCCESS = "Deleted assignment(s) from student: {}"
    MESSAGE_NOT_DELETED = "At least one assignment to delete must be provided."
    MESSAGE_ASSIGNMENT_NOT_EXIST = "This assignment does not exist for this student: {}"

    def __init__(self, index: int, descriptor: DeleteAssignmentDescriptor):
        self._index = index
        self._descriptor = descriptor

    def execute(self, model: Model) -> CommandResult:
        to_delete = self._descriptor.assignments

        if not to_delete:
            raise CommandError(DeleteAssignmentCommand.MESSAGE_NOT_DELETED)

        person = self.get_target(model, self._index)

        for assignment in sorted(to_delete, key=lambda a: a.name):
            if not person.has_assignment(assignment):
                raise CommandError(
                    DeleteAssignmentCommand.MESSAGE_ASSIGNMENT_NOT_EXIST.format(assignment.name)
                )

        edited = person.replace(assignments=person.assignments - to_delete)
        model.set_person(person, edited)

        return CommandResult(
            DeleteAssignmentCommand.MESSAGE_SUCCESS.format(format_person(edited)),
            mutated=True,
        )
