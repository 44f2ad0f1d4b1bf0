# models/class_group.py

"""
Represents a class group: a named cohort of students sharing a schedule and subject.

A `ClassGroup` optionally carries a weekly `TimeSlot`, the subject taught, the names of the
enrolled students, and the names of the assignments set for the group. Identity is by name
only, compared case-sensitively as stored; filtering by class group is case-insensitive and
is handled by `StudentInClassGroupPredicate`.

Both classes are immutable and safe to use as set members or dictionary keys.
"""

from __future__ import annotations

import datetime
from typing import Iterable

import core.formatters as formatters
from core.exceptions import ConstraintViolation
from models.fields import is_ascii_alnum

DAYS_OF_WEEK: tuple[str, ...] = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")


class TimeSlot:

    MESSAGE_CONSTRAINTS = "Time slots should be a weekday followed by a start and end time, e.g. MON 14:00-16:00"

    __slots__ = ("_day", "_start", "_end")

    def __init__(self, day: str, start: datetime.time, end: datetime.time):
        day = day.strip().upper()[:3] if isinstance(day, str) else ""
        if day not in DAYS_OF_WEEK or start >= end:
            raise ConstraintViolation(TimeSlot.MESSAGE_CONSTRAINTS)
        self._day: str = day
        self._start: datetime.time = start
        self._end: datetime.time = end

    @property
    def day(self) -> str:
        return self._day

    @property
    def start(self) -> datetime.time:
        return self._start

    @property
    def end(self) -> datetime.time:
        return self._end

    def overlaps(self, other: TimeSlot) -> bool:
        return (
            self._day == other._day
            and self._start < other._end
            and other._start < self._end
        )

    @classmethod
    def from_string(cls, text: str) -> TimeSlot:
        """
        Parses a time slot written as `DAY HH:MM-HH:MM`, e.g. "MON 14:00-16:00".

        Raises:
            ConstraintViolation: If the text is not in the expected format, the day is unknown,
                or the start time is not before the end time.
        """
        try:
            day, times = text.split()
            start_str, end_str = times.split("-")
            start = datetime.datetime.strptime(start_str, "%H:%M").time()
            end = datetime.datetime.strptime(end_str, "%H:%M").time()

        except (AttributeError, ValueError):
            raise ConstraintViolation(cls.MESSAGE_CONSTRAINTS) from None

        return cls(day, start, end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return (self._day, self._start, self._end) == (other._day, other._start, other._end)

    def __hash__(self) -> int:
        return hash((self._day, self._start, self._end))

    def __repr__(self) -> str:
        return f"TimeSlot({self._day}, {self._start}, {self._end})"

    def __str__(self) -> str:
        return f"{self._day} {formatters.format_time_range(self._start, self._end)}"


class ClassGroup:

    MESSAGE_CONSTRAINTS = "Class group names should be alphanumeric, may contain hyphens or underscores, and should not be blank"

    __slots__ = ("_name", "_time_slot", "_subject", "_students", "_assignment_names")

    def __init__(
        self,
        name: str,
        time_slot: TimeSlot | None = None,
        subject: str = "",
        students: Iterable[str] = (),
        assignment_names: Iterable[str] = (),
    ):
        self._name: str = ClassGroup.validate_name_input(name)
        self._time_slot: TimeSlot | None = time_slot
        self._subject: str = subject
        self._students: frozenset[str] = frozenset(students)
        self._assignment_names: tuple[str, ...] = tuple(assignment_names)

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def time_slot(self) -> TimeSlot | None:
        return self._time_slot

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def students(self) -> frozenset[str]:
        return self._students

    @property
    def assignment_names(self) -> tuple[str, ...]:
        return self._assignment_names

    def with_students(self, students: Iterable[str]) -> ClassGroup:
        return ClassGroup(
            self._name,
            self._time_slot,
            self._subject,
            students,
            self._assignment_names,
        )

    def matches_name(self, keyword: str) -> bool:
        return self._name.casefold() == keyword.casefold()

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "time_slot": str(self._time_slot) if self._time_slot else None,
            "subject": self._subject,
            "assignments": list(self._assignment_names),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ClassGroup:
        time_slot_str = data.get("time_slot")
        time_slot = TimeSlot.from_string(time_slot_str) if time_slot_str else None

        return cls(
            name=data["name"],
            time_slot=time_slot,
            subject=data.get("subject", ""),
            assignment_names=data.get("assignments", []),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ClassGroup):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"ClassGroup({self._name}, {self._time_slot!r}, {self._subject!r})"

    def __str__(self) -> str:
        return self._name

    # === data validators ===

    @staticmethod
    def is_valid_name(name: str) -> bool:
        if not name or not is_ascii_alnum(name[0]):
            return False
        return all(is_ascii_alnum(ch) or ch in "-_" for ch in name)

    @staticmethod
    def validate_name_input(name: str) -> str:
        if not isinstance(name, str) or not ClassGroup.is_valid_name(name):
            raise ConstraintViolation(ClassGroup.MESSAGE_CONSTRAINTS)
        return name
