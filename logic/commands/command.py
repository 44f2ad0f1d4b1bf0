# logic/commands/command.py

"""
Base class and result type shared by every command.

A command is built by its parser with fully validated arguments. `execute()` either applies the
change to the `Model` and returns a `CommandResult`, or raises `CommandError` and leaves the
`Model` exactly as it found it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from core.exceptions import CommandError
from logic.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from models.model import Model
from models.person import Person


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    show_help: bool = False
    exit: bool = False
    mutated: bool = False


class Command(ABC):

    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """
        Applies this command to `model`.

        Raises:
            CommandError: If the command cannot be applied; `model` is left unchanged.
        """
        raise NotImplementedError

    # === shared helpers ===

    @staticmethod
    def get_target(model: Model, index: int) -> Person:
        """
        Resolves a one-based index against the filtered person list.

        Raises:
            CommandError: If the index is outside the filtered list.
        """
        persons = model.filtered_persons

        if index < 1 or index > len(persons):
            raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)

        return persons[index - 1]

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"
