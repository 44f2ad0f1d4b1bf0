# logic/commands/edit_command.py

"""
Edits the details of an existing student.

The edit is described by an `EditPersonDescriptor`: every field left as None is carried over from
the existing student unchanged. An empty set for class groups or assignments clears them.
"""

from __future__ import annotations

from typing import Iterable

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
from models.assignment import Assignment
from models.class_group import ClassGroup
from models.fields import Level, Name, Phone
from models.model import Model
from models.person import Person


class EditPersonDescriptor:
    """
    Stores the fields to edit a student with. Each non-None field replaces the student's value.
    """

    def __init__(
        self,
        name: Name | None = None,
        phone: Phone | None = None,
        level: Level | None = None,
        class_groups: Iterable[ClassGroup] | None = None,
        assignments: Iterable[Assignment] | None = None,
    ):
        self.name: Name | None = name
        self.phone: Phone | None = phone
        self.level: Level | None = level
        self.class_groups: frozenset[ClassGroup] | None = (
            frozenset(class_groups) if class_groups is not None else None
        )
        self.assignments: frozenset[Assignment] | None = (
            frozenset(assignments) if assignments is not None else None
        )

    def copy(self) -> EditPersonDescriptor:
        return EditPersonDescriptor(
            self.name, self.phone, self.level, self.class_groups, self.assignments
        )

    def is_any_field_edited(self) -> bool:
        return any(
            field is not None
            for field in (
                self.name,
                self.phone,
                self.level,
                self.class_groups,
                self.assignments,
            )
        )

    def apply_to(self, person: Person) -> Person:
        """Returns a new `Person` with this descriptor's fields applied to `person`."""
        return Person(
            name=self.name or person.name,
            phone=self.phone or person.phone,
            level=self.level or person.level,
            class_groups=(
                self.class_groups
                if self.class_groups is not None
                else person.class_groups
            ),
            assignments=(
                self.assignments if self.assignments is not None else person.assignments
            ),
            remark=person.remark,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, EditPersonDescriptor):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"EditPersonDescriptor(name={self.name}, phone={self.phone}, level={self.level}, "
            f"class_groups={self.class_groups}, assignments={self.assignments})"
        )


class EditCommand(Command):

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the student identified by the index number used in the "
        "displayed list. Existing values will be overwritten by the input values; an empty "
        f"{PREFIX_CLASS_GROUP} or {PREFIX_ASSIGNMENT} clears them.\n"
        f"Parameters: INDEX (must be a positive integer) [{PREFIX_NAME}NAME] [{PREFIX_PHONE}PHONE] "
        f"[{PREFIX_LEVEL}LEVEL] [{PREFIX_CLASS_GROUP}CLASS_GROUP]... [{PREFIX_ASSIGNMENT}ASSIGNMENT]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 {PREFIX_LEVEL}Sec 4"
    )
    MESSAGE_SUCCESS = "Edited Student: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def __init__(self, index: int, descriptor: EditPersonDescriptor):
        self._index = index
        self._descriptor = descriptor.copy()

    def execute(self, model: Model) -> CommandResult:
        if not self._descriptor.is_any_field_edited():
            raise CommandError(EditCommand.MESSAGE_NOT_EDITED)

        person = self.get_target(model, self._index)
        edited = self._descriptor.apply_to(person)

        if edited != person and model.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)

        model.set_person(person, edited)

        return CommandResult(
            EditCommand.MESSAGE_SUCCESS.format(format_person(edited)),
            mutated=True,
        )
