# tests/test_person_parsers.py

import pytest

from core.exceptions import ParseError
from logic.commands.add_command import AddCommand
from logic.commands.delete_command import DeleteCommand
from logic.commands.edit_command import EditCommand, EditPersonDescriptor
from logic.commands.remark_command import RemarkCommand
from logic.messages import MESSAGE_DUPLICATE_FIELDS, invalid_format
from logic.parser.person_parsers import (
    parse_add_command,
    parse_delete_command,
    parse_edit_command,
    parse_remark_command,
)
from models.assignment import Assignment
from models.class_group import ClassGroup
from models.fields import Level, Name, Phone, Remark


# === add ===


def test_add_all_fields_present(person_factory):
    command = parse_add_command(
        " n/Bob Choo p/22222222 l/Sec 2 c/math-1000, phys-2000 c/chem-3000 a/Homework1"
    )

    expected = person_factory(
        "Bob Choo",
        "22222222",
        "Sec 2",
        class_groups=("math-1000", "phys-2000", "chem-3000"),
        assignments=("Homework1",),
    )
    assert command == AddCommand(expected)


def test_add_optional_fields_missing(person_factory):
    command = parse_add_command(" n/Amy Bee p/11111111 l/JC1")

    assert command == AddCommand(person_factory("Amy Bee", "11111111", "JC1"))


@pytest.mark.parametrize(
    "args",
    [
        " p/11111111 l/JC1",
        " n/Amy Bee l/JC1",
        " n/Amy Bee p/11111111",
        " some preamble n/Amy Bee p/11111111 l/JC1",
        " n/Amy Bee p/11111111 l/JC1 r/Quiet",
    ],
)
def test_add_invalid_format(args):
    with pytest.raises(ParseError) as exc_info:
        parse_add_command(args)

    assert str(exc_info.value) == invalid_format(AddCommand.MESSAGE_USAGE)


def test_add_repeated_single_valued_prefix():
    with pytest.raises(ParseError) as exc_info:
        parse_add_command(" n/Amy Bee p/11111111 p/22222222 l/JC1")

    assert str(exc_info.value) == MESSAGE_DUPLICATE_FIELDS + "p/"


@pytest.mark.parametrize(
    "args, message",
    [
        (" n/Amy* p/11111111 l/JC1", Name.MESSAGE_CONSTRAINTS),
        (" n/Amy Bee p/1a1 l/JC1", Phone.MESSAGE_CONSTRAINTS),
        (" n/Amy Bee p/11111111 l/JC-1", Level.MESSAGE_CONSTRAINTS),
        (" n/Amy Bee p/11111111 l/JC1 c/math 1000", ClassGroup.MESSAGE_CONSTRAINTS),
        (" n/Amy Bee p/11111111 l/JC1 a/Math Homework", Assignment.MESSAGE_CONSTRAINTS),
    ],
)
def test_add_invalid_value(args, message):
    with pytest.raises(ParseError) as exc_info:
        parse_add_command(args)

    assert str(exc_info.value) == message


# === edit ===


def test_edit_some_fields():
    command = parse_edit_command(" 2 p/91234567 l/Sec 4")

    assert command == EditCommand(
        2, EditPersonDescriptor(phone=Phone("91234567"), level=Level("Sec 4"))
    )


def test_edit_empty_class_group_and_assignment_clears_them():
    command = parse_edit_command(" 1 c/ a/")

    assert command == EditCommand(1, EditPersonDescriptor(class_groups=(), assignments=()))


def test_edit_collects_repeated_multi_valued_prefixes():
    command = parse_edit_command(" 3 c/math-1000 c/phys-2000,math-1000")

    assert command == EditCommand(
        3,
        EditPersonDescriptor(class_groups=[ClassGroup("math-1000"), ClassGroup("phys-2000")]),
    )


def test_edit_without_fields():
    with pytest.raises(ParseError) as exc_info:
        parse_edit_command(" 1")

    assert str(exc_info.value) == EditCommand.MESSAGE_NOT_EDITED


@pytest.mark.parametrize("args", [" n/Amy", " 0 n/Amy", " -5 n/Amy", " 1 some text n/Amy", " 1 x/y"])
def test_edit_invalid_format(args):
    with pytest.raises(ParseError) as exc_info:
        parse_edit_command(args)

    assert str(exc_info.value) == invalid_format(EditCommand.MESSAGE_USAGE)


def test_edit_invalid_value():
    with pytest.raises(ParseError) as exc_info:
        parse_edit_command(" 1 n/")

    assert str(exc_info.value) == Name.MESSAGE_CONSTRAINTS


# === delete ===


def test_delete_valid_index():
    assert parse_delete_command(" 1") == DeleteCommand(1)


@pytest.mark.parametrize("args", ["", " a", " 0", " 1 2", " n/1"])
def test_delete_invalid_index(args):
    with pytest.raises(ParseError) as exc_info:
        parse_delete_command(args)

    assert str(exc_info.value) == invalid_format(DeleteCommand.MESSAGE_USAGE)


# === remark ===


def test_remark_with_free_text():
    command = parse_remark_command(" 1 r/Needs help w/ algebra")

    assert command == RemarkCommand(1, Remark("Needs help w/ algebra"))


def test_remark_empty_value_removes_remark():
    assert parse_remark_command(" 2 r/") == RemarkCommand(2, None)


@pytest.mark.parametrize("args", [" 1", " r/Quiet", " zero r/Quiet"])
def test_remark_invalid_format(args):
    with pytest.raises(ParseError) as exc_info:
        parse_remark_command(args)

    assert str(exc_info.value) == invalid_format(RemarkCommand.MESSAGE_USAGE)


def test_remark_repeated_prefix():
    with pytest.raises(ParseError):
        parse_remark_command(" 1 r/Quiet r/Loud")
