# logic/messages.py

"""
User-facing messages shared across parsers and commands, and the one-line rendering of a `Person`
used in command feedback.
"""

from models.person import Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_DUPLICATE_PERSON = "This person already exists in the roster"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def format_person(person: Person) -> str:
    remark = f"; Remark: {person.remark}" if person.remark else ""

    return (
        f"{person.name}; Phone: {person.phone}; Level: {person.level}"
        f"; Class Groups: {person.class_group_names}"
        f"; Assignments: {person.assignment_names}"
        f"{remark}"
    )
