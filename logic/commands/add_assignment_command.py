# logic/commands/add_assignment_command.py

from __future__ import annotations

from typing import Iterable

from core.exceptions import CommandError
from logic.commands.command import Command, CommandResult
from logic.messages import format_person
from logic.parser.cli_syntax import PREFIX_ASSIGNMENT, PREFIX_CLASS_GROUP
from models.assignment import Assignment
from models.model import Model


class AddAssignmentDescriptor:
    """Stores the assignments to add to a student, and the class group they were set for."""

    def __init__(
        self,
        assignments: Iterable[Assignment] | None = None,
        class_group: str | None = None,
    ):
        self.assignments: frozenset[Assignment] | None = (
            frozenset(assignments) if assignments is not None else None
        )
        self.class_group: str | None = class_group

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddAssignmentDescriptor):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = sorted(a.name for a in self.assignments or ())
        return f"AddAssignmentDescriptor(assignments={names}, class_group={self.class_group})"


class AddAssignmentCommand(Command):
    """
    Adds one or more assignments to a single student.

    The whole request fails if any requested assignment is already held by the student; the
    error names the first such assignment in name order.
    """

    COMMAND_WORD = "addassign"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds assignments to the student identified by the index number used in the "
        "displayed list.\n"
        f"Parameters: INDEX {PREFIX_ASSIGNMENT}ASSIGNMENT[,ASSIGNMENT]... [{PREFIX_CLASS_GROUP}CLASS_GROUP]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_ASSIGNMENT}Homework1,Quiz2 {PREFIX_CLASS_GROUP}math-1000"
    )
    MESSAGE_SUCCESS = "Added assignment(s) to student: {}"
    MESSAGE_NOT_ADDED = "At least one assignment to add must be provided."
    MESSAGE_DUPLICATE_ASSIGNMENT = "This assignment already exists for this student: {}"
    MESSAGE_NOT_IN_CLASS_GROUP = "The student is not in class group: {}"

    def __init__(self, index: int, descriptor: AddAssignmentDescriptor):
        self._index = index
        self._descriptor = descriptor

    def execute(self, model: Model) -> CommandResult:
        to_add = self._descriptor.assignments

        if not to_add:
            raise CommandError(AddAssignmentCommand.MESSAGE_NOT_ADDED)

        person = self.get_target(model, self._index)

        class_group = self._descriptor.class_group
        if class_group is not None and not any(
            cg.matches_name(class_group) for cg in person.class_groups
        ):
            raise CommandError(
                AddAssignmentCommand.MESSAGE_NOT_IN_CLASS_GROUP.format(class_group)
            )

        for assignment in sorted(to_add, key=lambda a: a.name):
            if person.has_assignment(assignment):
                raise CommandError(
                    AddAssignmentCommand.MESSAGE_DUPLICATE_ASSIGNMENT.format(assignment.name)
                )

        edited = person.replace(assignments=person.assignments | to_add)
        model.set_person(person, edited)

        return CommandResult(
            AddAssignmentCommand.MESSAGE_SUCCESS.format(format_person(edited)),
            mutated=True,
        )
