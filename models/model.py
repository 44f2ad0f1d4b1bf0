# models/model.py

"""
The Model is what commands execute against: the `Roster` plus the currently installed filter.

`filtered_persons` is the list the user sees, and the list that command indices refer to.
"""

from __future__ import annotations

from typing import Callable

from models.person import Person
from models.roster import Roster

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True


class Model:

    def __init__(self, roster: Roster | None = None):
        self._roster: Roster = roster if roster is not None else Roster()
        self._predicate: PersonPredicate = show_all_persons

    # === properties ===

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def predicate(self) -> PersonPredicate:
        return self._predicate

    @property
    def filtered_persons(self) -> list[Person]:
        return [p for p in self._roster.persons if self._predicate(p)]

    # === filter ===

    def update_filter(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def show_all(self) -> None:
        self._predicate = show_all_persons

    # === roster delegates ===

    def has_person(self, person: Person) -> bool:
        return self._roster.has_person(person)

    def add_person(self, person: Person) -> None:
        self._roster.add_person(person)
        self.show_all()

    def set_person(self, target: Person, edited: Person) -> None:
        self._roster.set_person(target, edited)

    def delete_person(self, person: Person) -> None:
        self._roster.remove_person(person)

    def clear(self) -> None:
        self._roster.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._roster.persons == other._roster.persons
            and self.filtered_persons == other.filtered_persons
        )

    __hash__ = None  # type: ignore[assignment]
