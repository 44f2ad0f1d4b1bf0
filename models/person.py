# models/person.py

"""
Represents a student in the roster.

A `Person` stores a name, phone number, and level, an optional free-text remark, the class
groups the student belongs to, and the assignments the student has been set.

Persons are immutable. Commands never modify a `Person` in place: they build a replacement
with `replace()` and swap it into the `Roster` by identity, so no two commands ever share a
mutable reference.

Includes functionality for:
- Value equality across every field, used to detect duplicate persons
- Serializing to and from JSON-compatible dictionaries
"""

from __future__ import annotations

from typing import Any, Iterable

from models.assignment import Assignment
from models.class_group import ClassGroup
from models.fields import Level, Name, Phone, Remark

_UNSET: Any = object()


class Person:

    __slots__ = ("_name", "_phone", "_level", "_class_groups", "_assignments", "_remark")

    def __init__(
        self,
        name: Name,
        phone: Phone,
        level: Level,
        class_groups: Iterable[ClassGroup] = (),
        assignments: Iterable[Assignment] = (),
        remark: Remark | None = None,
    ):
        self._name: Name = name
        self._phone: Phone = phone
        self._level: Level = level
        self._class_groups: frozenset[ClassGroup] = frozenset(class_groups)
        self._assignments: frozenset[Assignment] = frozenset(assignments)
        self._remark: Remark | None = remark

    # === properties ===

    @property
    def name(self) -> Name:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def level(self) -> Level:
        return self._level

    @property
    def class_groups(self) -> frozenset[ClassGroup]:
        return self._class_groups

    @property
    def assignments(self) -> frozenset[Assignment]:
        return self._assignments

    @property
    def remark(self) -> Remark | None:
        return self._remark

    @property
    def class_group_names(self) -> list[str]:
        return sorted(cg.name for cg in self._class_groups)

    @property
    def assignment_names(self) -> list[str]:
        return sorted(a.name for a in self._assignments)

    # === data accessors ===

    def has_assignment(self, assignment: Assignment) -> bool:
        return assignment in self._assignments

    def get_assignment(self, name: str) -> Assignment | None:
        return next((a for a in self._assignments if a.name == name), None)

    # === copy-on-write ===

    def replace(
        self,
        name: Name = _UNSET,
        phone: Phone = _UNSET,
        level: Level = _UNSET,
        class_groups: Iterable[ClassGroup] = _UNSET,
        assignments: Iterable[Assignment] = _UNSET,
        remark: Remark | None = _UNSET,
    ) -> Person:
        """
        Returns a new `Person` with the given fields replaced and every other field carried over.

        Notes:
            - `remark=None` clears the remark; omitting the argument keeps it.
        """
        return Person(
            name=self._name if name is _UNSET else name,
            phone=self._phone if phone is _UNSET else phone,
            level=self._level if level is _UNSET else level,
            class_groups=self._class_groups if class_groups is _UNSET else class_groups,
            assignments=self._assignments if assignments is _UNSET else assignments,
            remark=self._remark if remark is _UNSET else remark,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name.value,
            "phone": self._phone.value,
            "level": self._level.value,
            "remark": self._remark.value if self._remark else None,
            "class_groups": [
                cg.to_dict() for cg in sorted(self._class_groups, key=lambda x: x.name)
            ],
            "assignments": [
                a.to_dict() for a in sorted(self._assignments, key=lambda x: x.name)
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Person:
        remark_str = data.get("remark")

        return cls(
            name=Name(data["name"]),
            phone=Phone(data["phone"]),
            level=Level(data["level"]),
            class_groups=[ClassGroup.from_dict(cg) for cg in data.get("class_groups", [])],
            assignments=[Assignment.from_dict(a) for a in data.get("assignments", [])],
            remark=Remark(remark_str) if remark_str else None,
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (
            self._name,
            self._phone,
            self._level,
            self._class_groups,
            self._assignments,
            self._remark,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Person({self._name}, {self._phone}, {self._level}, {self.class_group_names}, {self.assignment_names})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, phone: {self._phone}, level: {self._level}"
