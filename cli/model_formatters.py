# cli/model_formatters.py

# anything that renders domain objects for the console
from textwrap import dedent

from models.class_group import ClassGroup
from models.person import Person

# === person formatters ===


def format_assignments(person: Person) -> str:
    if not person.assignments:
        return "[NO ASSIGNMENTS]"

    return ", ".join(
        f"{a.name}{' [DONE]' if a.is_marked else ''}"
        for a in sorted(person.assignments, key=lambda x: x.name)
    )


def format_person_multiline(person: Person) -> str:
    remark = person.remark.value if person.remark else "[NO REMARK]"

    return dedent(
        f"""\
        {person.name}
        ... Phone: {person.phone}
        ... Level: {person.level}
        ... Class Groups: {", ".join(person.class_group_names) or "[NONE]"}
        ... Assignments: {format_assignments(person)}
        ... Remark: {remark}"""
    )


# === class group formatters ===


def format_class_group_oneline(class_group: ClassGroup) -> str:
    time_slot = str(class_group.time_slot) if class_group.time_slot else "[NO TIME SLOT]"
    count = len(class_group.students)

    return f"{class_group.name:<20} | {time_slot:<16} | {count} student(s)"


def format_class_group_clash(first: ClassGroup, second: ClassGroup) -> str:
    return f"{first.name} ({first.time_slot}) overlaps {second.name} ({second.time_slot})"
