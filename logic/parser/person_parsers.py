# logic/parser/person_parsers.py

"""
Parsers for the commands that create, edit, delete, and annotate students.
"""

from __future__ import annotations

from core.exceptions import ParseError
from logic.commands.add_command import AddCommand
from logic.commands.delete_command import DeleteCommand
from logic.commands.edit_command import EditCommand, EditPersonDescriptor
from logic.commands.remark_command import RemarkCommand
from logic.messages import invalid_format
from logic.parser.argument_tokenizer import tokenize
from logic.parser.cli_syntax import (
    PREFIX_ASSIGNMENT,
    PREFIX_CLASS_GROUP,
    PREFIX_LEVEL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
)
from logic.parser.parser_utils import (
    parse_assignments,
    parse_class_groups,
    parse_index,
    parse_level,
    parse_name,
    parse_phone,
    parse_remark,
    reject_unrecognized_prefixes,
)
from models.person import Person

PERSON_PREFIXES: tuple[str, ...] = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_LEVEL,
    PREFIX_CLASS_GROUP,
    PREFIX_ASSIGNMENT,
)


def _parse_index_or_usage(text: str, usage: str) -> int:
    try:
        return parse_index(text)

    except ParseError:
        raise ParseError(invalid_format(usage)) from None


def parse_add_command(args: str) -> AddCommand:
    """
    Parses the arguments of the `add` command.

    Raises:
        ParseError: If a required prefix is missing, a single-valued prefix is repeated, there is a
            preamble or a stray prefix, or any value fails validation.
    """
    usage = AddCommand.MESSAGE_USAGE

    reject_unrecognized_prefixes(args, PERSON_PREFIXES, usage)

    multimap = tokenize(args, *PERSON_PREFIXES)

    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_LEVEL)
    if not all(multimap.contains(p) for p in required) or multimap.get_preamble():
        raise ParseError(invalid_format(usage))

    multimap.verify_no_duplicate_prefixes_for(*required)

    person = Person(
        name=parse_name(multimap.get_value(PREFIX_NAME) or ""),
        phone=parse_phone(multimap.get_value(PREFIX_PHONE) or ""),
        level=parse_level(multimap.get_value(PREFIX_LEVEL) or ""),
        class_groups=parse_class_groups(multimap.get_all_values(PREFIX_CLASS_GROUP)),
        assignments=parse_assignments(multimap.get_all_values(PREFIX_ASSIGNMENT)),
    )

    return AddCommand(person)


def parse_edit_command(args: str) -> EditCommand:
    """
    Parses the arguments of the `edit` command.

    A `c/` or `a/` prefix given with no value replaces that field with an empty set.

    Raises:
        ParseError:
            - With the invalid-format message if the index is missing or invalid, or a stray prefix is present.
            - With `EditCommand.MESSAGE_NOT_EDITED` if no field prefix is given at all.
            - With the relevant constraint message if any value fails validation.
    """
    usage = EditCommand.MESSAGE_USAGE

    reject_unrecognized_prefixes(args, PERSON_PREFIXES, usage)

    multimap = tokenize(args, *PERSON_PREFIXES)
    index = _parse_index_or_usage(multimap.get_preamble(), usage)

    multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE, PREFIX_LEVEL)

    descriptor = EditPersonDescriptor()

    if multimap.contains(PREFIX_NAME):
        descriptor.name = parse_name(multimap.get_value(PREFIX_NAME) or "")

    if multimap.contains(PREFIX_PHONE):
        descriptor.phone = parse_phone(multimap.get_value(PREFIX_PHONE) or "")

    if multimap.contains(PREFIX_LEVEL):
        descriptor.level = parse_level(multimap.get_value(PREFIX_LEVEL) or "")

    if multimap.contains(PREFIX_CLASS_GROUP):
        descriptor.class_groups = frozenset(
            parse_class_groups(multimap.get_all_values(PREFIX_CLASS_GROUP))
        )

    if multimap.contains(PREFIX_ASSIGNMENT):
        descriptor.assignments = frozenset(
            parse_assignments(multimap.get_all_values(PREFIX_ASSIGNMENT))
        )

    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

    return EditCommand(index, descriptor)


def parse_delete_command(args: str) -> DeleteCommand:
    usage = DeleteCommand.MESSAGE_USAGE
    reject_unrecognized_prefixes(args, (), usage)

    return DeleteCommand(_parse_index_or_usage(args, usage))


def parse_remark_command(args: str) -> RemarkCommand:
    """
    Parses the arguments of the `remark` command.

    Remark text is free-form, so it is not scanned for stray prefixes: `r/needs help w/ algebra`
    is accepted as is. An empty `r/` removes the remark.

    Raises:
        ParseError: If the index is missing or invalid, or `r/` is absent or repeated.
    """
    usage = RemarkCommand.MESSAGE_USAGE

    multimap = tokenize(args, PREFIX_REMARK)

    if not multimap.contains(PREFIX_REMARK):
        raise ParseError(invalid_format(usage))

    index = _parse_index_or_usage(multimap.get_preamble(), usage)
    multimap.verify_no_duplicate_prefixes_for(PREFIX_REMARK)

    value = multimap.get_value(PREFIX_REMARK) or ""
    remark = parse_remark(value) if value else None

    return RemarkCommand(index, remark)
