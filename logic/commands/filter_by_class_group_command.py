# logic/commands/filter_by_class_group_command.py

from logic.commands.command import Command, CommandResult
from logic.parser.cli_syntax import PREFIX_CLASS_GROUP
from models.model import Model
from models.predicates import StudentInClassGroupPredicate


class FilterByClassGroupCommand(Command):
    """
    Shows only the students enrolled in every one of the given class groups.

    Class group names are matched case-insensitively. An empty result is not an error.
    """

    COMMAND_WORD = "filter"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Lists the students who belong to all of the given class groups "
        "(case-insensitive).\n"
        f"Parameters: {PREFIX_CLASS_GROUP}CLASS_GROUP[,CLASS_GROUP]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_CLASS_GROUP}math-1000,phys-2000"
    )
    MESSAGE_PERSONS_LISTED_OVERVIEW = "{} students listed!"

    def __init__(self, predicate: StudentInClassGroupPredicate):
        self._predicate = predicate

    def execute(self, model: Model) -> CommandResult:
        model.update_filter(self._predicate)

        return CommandResult(
            FilterByClassGroupCommand.MESSAGE_PERSONS_LISTED_OVERVIEW.format(
                len(model.filtered_persons)
            )
        )
