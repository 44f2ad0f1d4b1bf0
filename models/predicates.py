# models/predicates.py

"""
Predicates used to filter the roster view.
"""

from __future__ import annotations

from typing import Iterable

from models.person import Person


class StudentInClassGroupPredicate:
    """
    Tests that a `Person` belongs to every one of the given class groups.

    Keyword matching against class group names is case-insensitive. A person passes only if,
    for each keyword, at least one of their class groups matches it: filtering by {A, B}
    returns students enrolled in both A and B, not students enrolled in either.
    """

    def __init__(self, class_group_names: Iterable[str]):
        self._class_group_names: frozenset[str] = frozenset(class_group_names)

    @property
    def class_group_names(self) -> frozenset[str]:
        return self._class_group_names

    def __call__(self, person: Person) -> bool:
        return all(
            any(cg.matches_name(keyword) for cg in person.class_groups)
            for keyword in self._class_group_names
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, StudentInClassGroupPredicate):
            return NotImplemented
        return self._class_group_names == other._class_group_names

    def __hash__(self) -> int:
        return hash(self._class_group_names)

    def __repr__(self) -> str:
        return f"StudentInClassGroupPredicate({sorted(self._class_group_names)})"
