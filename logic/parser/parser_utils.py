# logic/parser/parser_utils.py

"""
Helpers that turn single raw argument values into validated value types.

Every helper strips surrounding whitespace before validating and converts a value type's
`ConstraintViolation` into a `ParseError` carrying the same constraint message.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from core.exceptions import ConstraintViolation, ParseError
from core.logger import get_logger
from logic.messages import MESSAGE_INVALID_INDEX, invalid_format
from logic.parser.argument_tokenizer import find_unrecognized_prefixes
from models.assignment import Assignment
from models.class_group import ClassGroup
from models.fields import Level, Name, Phone, Remark

T = TypeVar("T")

logger = get_logger()


def _build(factory: Callable[[str], T], value: str) -> T:
    try:
        return factory(value.strip())

    except ConstraintViolation as e:
        logger.debug(f"Rejected value {value!r}: {e}")
        raise ParseError(str(e)) from None


# === structural checks ===


def reject_unrecognized_prefixes(args: str, allowed: tuple[str, ...], usage: str) -> None:
    """
    Raises:
        ParseError: With the invalid-format message for `usage`, if `args` holds a stray prefix.
    """
    stray = find_unrecognized_prefixes(args, allowed)

    if stray:
        logger.debug(f"Unrecognized prefixes {stray} in {args!r}")
        raise ParseError(invalid_format(usage))


def split_comma_values(values: Iterable[str]) -> list[str]:
    """
    Splits each value on commas and returns the stripped pieces in order.

    A value that is entirely blank contributes nothing, so `c/` on its own yields no pieces.
    Trailing blank pieces are dropped, so `math,` yields only `math`. Blank pieces before the
    last name (`math,,phys`, `,math`) are kept so that validation rejects them.
    """
    pieces = []

    for value in values:
        split = [piece.strip() for piece in value.split(",")]
        while split and not split[-1]:
            split.pop()
        pieces.extend(split)

    return pieces


# === index parsers ===


def parse_index(one_based_index: str) -> int:
    """
    Parses a one-based index.

    Returns:
        The index as a positive int (still one-based).

    Raises:
        ParseError: If the text is not a non-zero unsigned integer.
    """
    trimmed = one_based_index.strip()

    if not trimmed.isdigit() or not trimmed.isascii() or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)

    return int(trimmed)


def parse_indices(text: str) -> list[int]:
    """
    Parses one or more one-based indices separated by commas and/or whitespace.

    Returns:
        The indices in the order given, duplicates included.

    Raises:
        ParseError: If no index is given or any index is invalid.
    """
    tokens = text.replace(",", " ").split()

    if not tokens:
        raise ParseError(MESSAGE_INVALID_INDEX)

    return [parse_index(token) for token in tokens]


# === field parsers ===


def parse_name(name: str) -> Name:
    return _build(Name, name)


def parse_phone(phone: str) -> Phone:
    return _build(Phone, phone)


def parse_level(level: str) -> Level:
    return _build(Level, level)


def parse_remark(remark: str) -> Remark:
    return _build(Remark, remark)


def parse_class_group(name: str) -> ClassGroup:
    return _build(ClassGroup, name)


def parse_class_groups(values: Iterable[str]) -> set[ClassGroup]:
    """Parses comma-separated class group names from every value, deduplicating by name."""
    return {parse_class_group(v) for v in split_comma_values(values)}


def parse_assignment(name: str, class_group: str | None = None) -> Assignment:
    return _build(lambda x: Assignment(x, class_group), name)


def parse_assignments(values: Iterable[str], class_group: str | None = None) -> set[Assignment]:
    """Parses comma-separated assignment names from every value, deduplicating by name."""
    return {parse_assignment(v, class_group) for v in split_comma_values(values)}
