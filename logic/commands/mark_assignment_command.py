# logic/commands/mark_assignment_command.py

"""
Marks (or unmarks) one assignment as complete for one or more students at once.

Target indices are deduplicated, keeping first-occurrence order, so `mark 1 1 2 a/Quiz1` marks
students 1 and 2 exactly once each. The command is atomic: every index must be valid and every
targeted student must hold the assignment before anything is changed.
"""

from __future__ import annotations

from typing import Iterable

import core.formatters as formatters
from core.exceptions import CommandError
from logic.commands.command import Command, CommandResult
from logic.parser.cli_syntax import PREFIX_ASSIGNMENT
from models.assignment import Assignment
from models.model import Model
from models.person import Person


class MarkAssignmentCommand(Command):

    COMMAND_WORD = "mark"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Marks an assignment as complete for the students identified by the index "
        "numbers used in the displayed list.\n"
        f"Parameters: INDEX[,INDEX]... {PREFIX_ASSIGNMENT}ASSIGNMENT\n"
        f"Example: {COMMAND_WORD} 1,2,3 {PREFIX_ASSIGNMENT}Physics1800"
    )
    MESSAGE_SUCCESS = "Marked assignment {} as complete for: {}"
    MESSAGE_INVALID_ASSIGNMENT_IN_PERSON = "The assignment {} does not exist for the selected student(s)."

    MARKED: bool = True

    def __init__(self, indices: Iterable[int], assignment: Assignment):
        # dict.fromkeys keeps first-occurrence order
        self._indices: tuple[int, ...] = tuple(dict.fromkeys(indices))
        self._assignment = assignment

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    def execute(self, model: Model) -> CommandResult:
        targets = [self.get_target(model, index) for index in self._indices]

        if any(not person.has_assignment(self._assignment) for person in targets):
            raise CommandError(
                self.MESSAGE_INVALID_ASSIGNMENT_IN_PERSON.format(self._assignment.name)
            )

        for person in targets:
            model.set_person(person, self._with_flag(person))

        names = formatters.format_comma_separated(
            formatters.to_title_case(person.name.value) for person in targets
        )

        return CommandResult(
            self.MESSAGE_SUCCESS.format(
                formatters.to_title_case(self._assignment.name), names
            ),
            mutated=True,
        )

    def _with_flag(self, person: Person) -> Person:
        current = person.get_assignment(self._assignment.name)
        updated = current.with_marked(self.MARKED)
        # rebuild the set so the updated assignment replaces the equal-by-name original
        assignments = (person.assignments - {current}) | {updated}
        return person.replace(assignments=assignments)


class UnmarkAssignmentCommand(MarkAssignmentCommand):

    COMMAND_WORD = "unmark"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Marks an assignment as not complete for the students identified by the index "
        "numbers used in the displayed list.\n"
        f"Parameters: INDEX[,INDEX]... {PREFIX_ASSIGNMENT}ASSIGNMENT\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_ASSIGNMENT}Physics1800"
    )
    MESSAGE_SUCCESS = "Unmarked assignment {} for: {}"

    MARKED = False
