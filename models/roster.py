# models/roster.py

"""
The Roster model is the central data object of the program and the "source of truth" for all persons.

Persons are kept in a list, in insertion order, and written to a single .json file upon saving.
Edits replace a `Person` by identity rather than mutating it, so a replaced record is never
visible to later commands.

Provides functions for loading a Roster from disk and saving it back, and for adding, replacing,
and removing persons. The aggregate `class_groups()` view rebuilds each `ClassGroup` with the
names of its enrolled students.
"""

from __future__ import annotations

import json
import os
from typing import Any, Iterable

from core.logger import get_logger
from core.response import ErrorCode, Response
from models.class_group import ClassGroup
from models.person import Person

logger = get_logger()


class Roster:

    def __init__(self, persons: Iterable[Person] = ()):
        self._persons: list[Person] = []
        self._unsaved_changes: bool = False

        for person in persons:
            self.add_person(person)

        self._unsaved_changes = False

    # === properties ===

    @property
    def persons(self) -> list[Person]:
        return list(self._persons)

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def __len__(self) -> int:
        return len(self._persons)

    def __contains__(self, person: object) -> bool:
        return person in self._persons

    # === public classmethods ===

    @classmethod
    def load(cls, file_path: str) -> Response:
        """
        Loads a previously serialized roster from disk.

        Args:
            file_path (str): The path of the .json file holding the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read and every record was valid, or if the file does not exist.
                    - False for JSON deserialization issues, invalid records, or read failures.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.INVALID_INPUT` if the file is not valid JSON or has the wrong shape.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record fails validation.
                    - `ErrorCode.INTERNAL_ERROR` if the file cannot be read.
                - data (dict): On success, "roster" (Roster): the loaded `Roster`.

        Notes:
            - A missing file is not an error: an empty `Roster` is returned so a first run can start fresh.
            - Loading fails fast: one invalid record aborts the whole load.
        """
        if not os.path.exists(file_path):
            logger.info(f"No roster found at {file_path}, starting with an empty roster.")
            return Response.succeed(data={"roster": cls()})

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                raw = json.load(f)

            roster = cls.from_dict(raw)

        except json.JSONDecodeError as e:
            return Response.fail(
                detail=f"Failed to parse JSON data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except (KeyError, TypeError) as e:
            return Response.fail(
                detail=f"Malformed roster file: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info(f"Loaded {len(roster)} persons from {file_path}.")
            return Response.succeed(data={"roster": roster})

    # === persistence and import ===

    def to_dict(self) -> dict[str, Any]:
        return {"persons": [p.to_dict() for p in self._persons]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Roster:
        """
        Builds a `Roster` from its serialized form.

        Raises:
            TypeError: If `data` is not a dictionary holding a "persons" list.
            ValueError: If a person record is invalid or duplicates an earlier record.
        """
        if not isinstance(data, dict) or not isinstance(data.get("persons"), list):
            raise TypeError("Roster data must be a dictionary with a 'persons' list.")

        roster = cls()
        for record in data["persons"]:
            person = Person.from_dict(record)
            if roster.has_person(person):
                raise ValueError(f"Duplicate person in roster data: {person.name}")
            roster.add_person(person)

        roster._unsaved_changes = False
        return roster

    def save(self, file_path: str) -> Response:
        """
        Serializes the roster and writes it to disk in JSON format.

        Args:
            file_path (str): The target .json file. Parent directories are created if missing.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the file was written.
                - detail (str | None): "Roster successfully saved to disk." on success, otherwise the error.
                - error (ErrorCode | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if the data cannot be serialized.
                    - `ErrorCode.INTERNAL_ERROR` if the file cannot be written.

        Notes:
            - This intentionally overwrites existing data.
        """
        try:
            dir_path = os.path.dirname(file_path)
            if dir_path:
                os.makedirs(dir_path, exist_ok=True)

            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2, sort_keys=True)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            logger.error(f"Failed to write roster to {file_path}: {e}")
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False
            logger.info(f"Saved {len(self._persons)} persons to {file_path}.")
            return Response.succeed(detail="Roster successfully saved to disk.")

    # === data accessors ===

    def has_person(self, person: Person) -> bool:
        return person in self._persons

    def index_of(self, person: Person) -> int:
        """Returns the position of `person` in the roster, matched by identity."""
        for i, p in enumerate(self._persons):
            if p is person:
                return i
        raise LookupError(f"Person is not in the roster: {person.name}")

    def class_groups(self) -> list[ClassGroup]:
        """
        Collects every class group that at least one person belongs to.

        Returns:
            A list of `ClassGroup` objects sorted by name, each carrying the names of its enrolled students.

        Notes:
            - Groups are keyed by their stored (case-sensitive) name.
            - Schedule and subject details are taken from the first person found in each group.
        """
        groups: dict[str, ClassGroup] = {}
        members: dict[str, list[str]] = {}

        for person in self._persons:
            for cg in person.class_groups:
                groups.setdefault(cg.name, cg)
                members.setdefault(cg.name, []).append(person.name.value)

        return [
            groups[name].with_students(members[name]) for name in sorted(groups)
        ]

    def class_group_clashes(self) -> list[tuple[ClassGroup, ClassGroup]]:
        """
        Finds pairs of class groups whose weekly time slots overlap.

        Returns:
            A list of `(earlier, later)` pairs in class group name order. Groups without a time slot
            never clash.
        """
        scheduled = [cg for cg in self.class_groups() if cg.time_slot is not None]

        return [
            (first, second)
            for i, first in enumerate(scheduled)
            for second in scheduled[i + 1 :]
            if first.time_slot.overlaps(second.time_slot)
        ]

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    def add_person(self, person: Person) -> None:
        self._persons.append(person)
        self._mark_dirty()

    def set_person(self, target: Person, edited: Person) -> None:
        """
        Replaces `target` with `edited` in place, keeping its position.

        Raises:
            LookupError: If `target` is not in the roster.
        """
        self._persons[self.index_of(target)] = edited
        self._mark_dirty()

    def remove_person(self, person: Person) -> None:
        del self._persons[self.index_of(person)]
        self._mark_dirty()

    def clear(self) -> None:
        self._persons.clear()
        self._mark_dirty()
