# logic/parser/assignment_parsers.py

"""
Parsers for the commands that add, delete, mark, and unmark student assignments.
"""

from __future__ import annotations

from core.exceptions import ParseError
from logic.commands.add_assignment_command import (
    AddAssignmentCommand,
    AddAssignmentDescriptor,
)
from logic.commands.delete_assignment_command import (
    DeleteAssignmentCommand,
    DeleteAssignmentDescriptor,
)
from logic.commands.mark_assignment_command import (
    MarkAssignmentCommand,
    UnmarkAssignmentCommand,
)
from logic.messages import invalid_format
from logic.parser.argument_tokenizer import ArgumentMultimap, tokenize
from logic.parser.cli_syntax import PREFIX_ASSIGNMENT, PREFIX_CLASS_GROUP
from logic.parser.parser_utils import (
    parse_assignment,
    parse_assignments,
    parse_class_group,
    parse_index,
    parse_indices,
    reject_unrecognized_prefixes,
)


def _tokenize_with_index(args: str, usage: str, *prefixes: str) -> tuple[int, ArgumentMultimap]:
    reject_unrecognized_prefixes(args, prefixes, usage)

    multimap = tokenize(args, *prefixes)

    if not multimap.contains(PREFIX_ASSIGNMENT):
        raise ParseError(invalid_format(usage))

    try:
        index = parse_index(multimap.get_preamble())

    except ParseError:
        raise ParseError(invalid_format(usage)) from None

    return index, multimap


def parse_add_assignment_command(args: str) -> AddAssignmentCommand:
    """
    Parses `INDEX a/NAME[,NAME]... [a/NAME]... [c/CLASS_GROUP]`.

    Raises:
        ParseError: If the index or `a/` is missing, `c/` is repeated, or any name is invalid.
    """
    usage = AddAssignmentCommand.MESSAGE_USAGE
    index, multimap = _tokenize_with_index(args, usage, PREFIX_ASSIGNMENT, PREFIX_CLASS_GROUP)

    multimap.verify_no_duplicate_prefixes_for(PREFIX_CLASS_GROUP)

    class_group = None
    if multimap.contains(PREFIX_CLASS_GROUP):
        class_group = parse_class_group(multimap.get_value(PREFIX_CLASS_GROUP) or "").name

    assignments = parse_assignments(multimap.get_all_values(PREFIX_ASSIGNMENT), class_group)

    return AddAssignmentCommand(index, AddAssignmentDescriptor(assignments, class_group))


def parse_delete_assignment_command(args: str) -> DeleteAssignmentCommand:
    """
    Parses `INDEX a/NAME[,NAME]... [a/NAME]...`.

    Raises:
        ParseError: If the index or `a/` is missing, or any name is invalid.
    """
    usage = DeleteAssignmentCommand.MESSAGE_USAGE
    index, multimap = _tokenize_with_index(args, usage, PREFIX_ASSIGNMENT)

    assignments = parse_assignments(multimap.get_all_values(PREFIX_ASSIGNMENT))

    return DeleteAssignmentCommand(index, DeleteAssignmentDescriptor(assignments))


def _parse_mark_arguments(args: str, usage: str):
    reject_unrecognized_prefixes(args, (PREFIX_ASSIGNMENT,), usage)

    multimap = tokenize(args, PREFIX_ASSIGNMENT)

    if not multimap.contains(PREFIX_ASSIGNMENT):
        raise ParseError(invalid_format(usage))

    multimap.verify_no_duplicate_prefixes_for(PREFIX_ASSIGNMENT)

    try:
        indices = parse_indices(multimap.get_preamble())

    except ParseError:
        raise ParseError(invalid_format(usage)) from None

    assignment = parse_assignment(multimap.get_value(PREFIX_ASSIGNMENT) or "")

    return indices, assignment


def parse_mark_assignment_command(args: str) -> MarkAssignmentCommand:
    """
    Parses `INDEX[,INDEX]... a/NAME`. Indices may be separated by commas and/or spaces.

    Raises:
        ParseError: If no valid index is given, `a/` is missing or repeated, or the name is invalid.
    """
    indices, assignment = _parse_mark_arguments(args, MarkAssignmentCommand.MESSAGE_USAGE)
    return MarkAssignmentCommand(indices, assignment)


def parse_unmark_assignment_command(args: str) -> UnmarkAssignmentCommand:
    indices, assignment = _parse_mark_arguments(args, UnmarkAssignmentCommand.MESSAGE_USAGE)
    return UnmarkAssignmentCommand(indices, assignment)
