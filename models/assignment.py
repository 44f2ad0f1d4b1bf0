# models/assignment.py

"""
The Assignment model represents a named task tracked per student.

An `Assignment` optionally records the class group it was set for, and carries a marked
(completed) flag. Two assignments are equal if and only if their names are equal: the class
group and the marked flag are deliberately excluded from equality and hashing, so a student's
assignment set can never hold two assignments with the same name.

Instances are immutable. Marking produces a new `Assignment` via `with_marked()`.
"""

from __future__ import annotations

from core.exceptions import ConstraintViolation
from models.fields import is_ascii_alnum


class Assignment:

    MESSAGE_CONSTRAINTS = "Assignment names should be alphanumeric"

    __slots__ = ("_name", "_class_group", "_is_marked")

    def __init__(
        self,
        name: str,
        class_group: str | None = None,
        is_marked: bool = False,
    ):
        self._name: str = Assignment.validate_name_input(name)
        self._class_group: str | None = class_group
        self._is_marked: bool = is_marked

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def class_group(self) -> str | None:
        return self._class_group

    @property
    def is_marked(self) -> bool:
        return self._is_marked

    def with_marked(self, is_marked: bool = True) -> Assignment:
        return Assignment(self._name, self._class_group, is_marked)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "class_group": self._class_group,
            "marked": self._is_marked,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Assignment:
        return cls(
            name=data["name"],
            class_group=data.get("class_group"),
            is_marked=data.get("marked", False),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Assignment):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Assignment({self._name}, {self._class_group}, {self._is_marked})"

    def __str__(self) -> str:
        return f"[{self._name}]"

    # === data validators ===

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return bool(name) and all(is_ascii_alnum(ch) for ch in name)

    @staticmethod
    def validate_name_input(name: str) -> str:
        """
        Validates an `Assignment` name.

        Args:
            name (str): The raw assignment name.

        Returns:
            The unchanged name, if it consists of one or more alphanumeric characters.

        Raises:
            ConstraintViolation: If the name is empty, not a string, or contains any other character.
        """
        if not isinstance(name, str) or not Assignment.is_valid_name(name):
            raise ConstraintViolation(Assignment.MESSAGE_CONSTRAINTS)
        return name
