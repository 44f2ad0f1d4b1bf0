# logic/parser/filter_parser.py

from core.exceptions import ParseError
from logic.commands.filter_by_class_group_command import FilterByClassGroupCommand
from logic.messages import invalid_format
from logic.parser.argument_tokenizer import tokenize
from logic.parser.cli_syntax import PREFIX_CLASS_GROUP
from logic.parser.parser_utils import (
    parse_class_group,
    reject_unrecognized_prefixes,
    split_comma_values,
)
from models.class_group import ClassGroup
from models.predicates import StudentInClassGroupPredicate


def parse_filter_command(args: str) -> FilterByClassGroupCommand:
    """
    Parses the arguments of the `filter` command.

    Expects exactly one `c/` prefix holding one or more comma-separated class group names, and
    nothing else. Whitespace around names and commas is ignored, and repeated names collapse
    into one.

    Raises:
        ParseError:
            - With the invalid-format message if there is a preamble, a missing or repeated `c/`,
              any other prefix, a stray `/` token, or a value holding only commas.
            - With the class group constraint message if the value is blank or a name is invalid.
    """
    usage = FilterByClassGroupCommand.MESSAGE_USAGE

    reject_unrecognized_prefixes(args, (PREFIX_CLASS_GROUP,), usage)

    multimap = tokenize(args, PREFIX_CLASS_GROUP)

    if not multimap.contains(PREFIX_CLASS_GROUP) or multimap.get_preamble():
        raise ParseError(invalid_format(usage))

    if len(multimap.get_all_values(PREFIX_CLASS_GROUP)) > 1:
        raise ParseError(invalid_format(usage))

    value = multimap.get_value(PREFIX_CLASS_GROUP) or ""

    if not value.strip():
        raise ParseError(ClassGroup.MESSAGE_CONSTRAINTS)

    names = {parse_class_group(v).name for v in split_comma_values([value])}

    if not names:
        raise ParseError(invalid_format(usage))

    return FilterByClassGroupCommand(StudentInClassGroupPredicate(names))
