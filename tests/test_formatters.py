# tests/test_formatters.py

import datetime

import core.formatters as formatters
from cli.model_formatters import (
    format_assignments,
    format_class_group_oneline,
    format_person_multiline,
)
from models.assignment import Assignment
from models.class_group import ClassGroup, TimeSlot


def test_to_title_case():
    assert formatters.to_title_case("alice pauline") == "Alice Pauline"
    assert formatters.to_title_case("BENSON MEIER") == "Benson Meier"
    assert formatters.to_title_case("sec 2b") == "Sec 2b"
    assert formatters.to_title_case("Physics1800") == "Physics1800"


def test_format_comma_separated():
    assert formatters.format_comma_separated([]) == ""
    assert formatters.format_comma_separated(["a", "b"]) == "a, b"


def test_format_banner_text():
    banner = formatters.format_banner_text("TITLE", width=9)

    assert banner == "=========\n  TITLE  \n========="


def test_format_time_range():
    start = datetime.time(9, 5)
    end = datetime.time(10, 30)

    assert formatters.format_time_range(start, end) == "09:05-10:30"


def test_format_assignments_marks_completed(person_factory):
    person = person_factory("Amy Bee").replace(
        assignments=[Assignment("Quiz2", is_marked=True), Assignment("Homework1")]
    )

    assert format_assignments(person) == "Homework1, Quiz2 [DONE]"
    assert format_assignments(person_factory("Bob Choo")) == "[NO ASSIGNMENTS]"


def test_format_person_multiline(alice):
    lines = format_person_multiline(alice).splitlines()

    assert lines == [
        "Alice Pauline",
        "... Phone: 94351253",
        "... Level: Sec 3",
        "... Class Groups: math-1000, phys-2000",
        "... Assignments: Homework1",
        "... Remark: [NO REMARK]",
    ]


def test_format_class_group_oneline():
    group = ClassGroup(
        "math-1000", time_slot=TimeSlot.from_string("MON 14:00-16:00")
    ).with_students(["Alice Pauline", "Benson Meier"])

    line = format_class_group_oneline(group)

    assert line.startswith("math-1000")
    assert "MON 14:00-16:00" in line
    assert line.endswith("2 student(s)")
