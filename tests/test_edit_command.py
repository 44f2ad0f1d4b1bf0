# tests/test_edit_command.py

import pytest

from core.exceptions import CommandError
from logic.commands.edit_command import EditCommand, EditPersonDescriptor
from logic.messages import MESSAGE_DUPLICATE_PERSON, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from models.assignment import Assignment
from models.class_group import ClassGroup
from models.fields import Level, Name, Phone, Remark
from models.predicates import StudentInClassGroupPredicate


def test_edit_some_fields(sample_model, expected_model, alice):
    descriptor = EditPersonDescriptor(phone=Phone("91234567"), level=Level("Sec 4"))

    result = EditCommand(1, descriptor).execute(sample_model)

    edited = alice.replace(phone=Phone("91234567"), level=Level("Sec 4"))
    expected_model.set_person(alice, edited)

    assert result.feedback.startswith("Edited Student: Alice Pauline; Phone: 91234567; Level: Sec 4")
    assert result.mutated
    assert sample_model == expected_model


def test_edit_all_fields(sample_model, daniel):
    descriptor = EditPersonDescriptor(
        name=Name("Dan Meier"),
        phone=Phone("80000000"),
        level=Level("JC1"),
        class_groups=[ClassGroup("math-1000")],
        assignments=[Assignment("Quiz2")],
    )

    EditCommand(4, descriptor).execute(sample_model)

    edited = sample_model.filtered_persons[3]
    assert edited.name == Name("Dan Meier")
    assert edited.class_group_names == ["math-1000"]
    assert edited.assignment_names == ["Quiz2"]
    assert daniel not in sample_model.roster


def test_empty_sets_clear_class_groups_and_assignments(sample_model, alice):
    EditCommand(1, EditPersonDescriptor(class_groups=(), assignments=())).execute(sample_model)

    edited = sample_model.filtered_persons[0]
    assert edited.class_groups == frozenset()
    assert edited.assignments == frozenset()
    assert edited.name == alice.name


def test_edit_keeps_remark(sample_model, person_factory):
    person = person_factory("Elle Meyer", "93333333", remark="Quiet")
    sample_model.add_person(person)

    EditCommand(5, EditPersonDescriptor(level=Level("JC2"))).execute(sample_model)

    assert sample_model.filtered_persons[4].remark == Remark("Quiet")


def test_no_field_edited_fails(sample_model, expected_model):
    with pytest.raises(CommandError) as exc_info:
        EditCommand(1, EditPersonDescriptor()).execute(sample_model)

    assert str(exc_info.value) == EditCommand.MESSAGE_NOT_EDITED
    assert sample_model == expected_model


def test_edit_to_own_values_succeeds(sample_model, expected_model, benson):
    descriptor = EditPersonDescriptor(name=benson.name, phone=benson.phone)

    EditCommand(2, descriptor).execute(sample_model)

    assert sample_model == expected_model


def test_edit_into_duplicate_of_another_person_fails(sample_model, expected_model, carl):
    descriptor = EditPersonDescriptor(
        name=carl.name,
        phone=carl.phone,
        level=carl.level,
        class_groups=carl.class_groups,
        assignments=(),
    )

    with pytest.raises(CommandError) as exc_info:
        EditCommand(4, descriptor).execute(sample_model)

    assert str(exc_info.value) == MESSAGE_DUPLICATE_PERSON
    assert sample_model == expected_model


def test_same_name_with_other_details_is_not_a_duplicate(sample_model, carl):
    EditCommand(4, EditPersonDescriptor(name=carl.name)).execute(sample_model)

    assert [p.name for p in sample_model.filtered_persons].count(carl.name) == 2


def test_index_out_of_range_fails(sample_model):
    with pytest.raises(CommandError) as exc_info:
        EditCommand(5, EditPersonDescriptor(name=Name("Zed"))).execute(sample_model)

    assert str(exc_info.value) == MESSAGE_INVALID_PERSON_DISPLAYED_INDEX


def test_edit_keeps_current_filter(sample_model):
    predicate = StudentInClassGroupPredicate({"math-1000"})
    sample_model.update_filter(predicate)

    EditCommand(2, EditPersonDescriptor(phone=Phone("90000000"))).execute(sample_model)

    assert sample_model.predicate == predicate
    assert sample_model.filtered_persons[1].phone == Phone("90000000")


def test_descriptor_is_copied_on_construction():
    descriptor = EditPersonDescriptor(name=Name("Amy"))
    command = EditCommand(1, descriptor)

    descriptor.name = Name("Bob")

    assert command == EditCommand(1, EditPersonDescriptor(name=Name("Amy")))
