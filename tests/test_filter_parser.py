# tests/test_filter_parser.py

import pytest

from core.exceptions import ParseError
from logic.commands.filter_by_class_group_command import FilterByClassGroupCommand
from logic.messages import invalid_format
from logic.parser.filter_parser import parse_filter_command
from models.class_group import ClassGroup
from models.predicates import StudentInClassGroupPredicate

INVALID_FORMAT = invalid_format(FilterByClassGroupCommand.MESSAGE_USAGE)


def expected_command(*names):
    return FilterByClassGroupCommand(StudentInClassGroupPredicate(names))


def test_single_class_group():
    assert parse_filter_command(" c/math-1000") == expected_command("math-1000")


def test_multiple_class_groups():
    assert parse_filter_command(" c/math-1000,phys-2000") == expected_command(
        "math-1000", "phys-2000"
    )


def test_whitespace_around_commas_is_ignored():
    assert parse_filter_command(" c/ math-1000 ,  phys-2000  ") == expected_command(
        "math-1000", "phys-2000"
    )


def test_repeated_names_collapse():
    assert parse_filter_command(" c/math-1000,math-1000") == expected_command("math-1000")


@pytest.mark.parametrize(
    "args",
    [
        " c/math-1000 b/test",
        " c/math-1000 asdfas/",
        " /test c/math-1000",
        " c/math-1000 l/JC1",
        " c/math-1000 a/HW1",
        " c/math-1000 n/Alex",
    ],
)
def test_stray_prefixes_are_rejected(args):
    with pytest.raises(ParseError) as exc_info:
        parse_filter_command(args)

    assert str(exc_info.value) == INVALID_FORMAT


@pytest.mark.parametrize("args", ["", " ", " math-1000", " 1 c/math-1000"])
def test_missing_prefix_or_preamble_is_rejected(args):
    with pytest.raises(ParseError) as exc_info:
        parse_filter_command(args)

    assert str(exc_info.value) == INVALID_FORMAT


@pytest.mark.parametrize("args", [" c/ c/math-1000", " c/math-1000 c/phys-2000"])
def test_repeated_prefix_is_rejected(args):
    with pytest.raises(ParseError) as exc_info:
        parse_filter_command(args)

    assert str(exc_info.value) == INVALID_FORMAT


@pytest.mark.parametrize("args", [" c/", " c/   ", " c/math-1000,,phys-2000", " c/,math-1000"])
def test_blank_values_are_rejected_with_constraint_message(args):
    with pytest.raises(ParseError) as exc_info:
        parse_filter_command(args)

    assert str(exc_info.value) == ClassGroup.MESSAGE_CONSTRAINTS


def test_invalid_class_group_name_is_rejected():
    with pytest.raises(ParseError) as exc_info:
        parse_filter_command(" c/math 1000")

    assert str(exc_info.value) == ClassGroup.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize(
    "args, names",
    [
        (" c/math-1000,", ["math-1000"]),
        (" c/math-1000, ", ["math-1000"]),
        (" c/math-1000,phys-2000,,", ["math-1000", "phys-2000"]),
    ],
)
def test_trailing_commas_are_ignored(args, names):
    assert parse_filter_command(args) == expected_command(*names)


@pytest.mark.parametrize("args", [" c/,", " c/ , ,"])
def test_value_with_only_commas_is_rejected(args):
    with pytest.raises(ParseError) as exc_info:
        parse_filter_command(args)

    assert str(exc_info.value) == INVALID_FORMAT
