# models/fields.py

"""
Immutable, validated string fields held by a `Person`.

Each field type validates its raw input once, at construction, and raises `ConstraintViolation`
carrying the type's fixed `MESSAGE_CONSTRAINTS` if the input is rejected. A field object is
therefore always valid. Equality, hashing, and display are derived solely from the stored value.

Validation rules are written as explicit character checks rather than regular expressions:
- `Name`, `Level`: first character alphanumeric, remaining characters alphanumeric or spaces.
- `Phone`: digits only, at least three of them.
- `Remark`: any text whose first character is not whitespace.
"""

from __future__ import annotations

from core.exceptions import ConstraintViolation


def is_ascii_alnum(ch: str) -> bool:
    # str.isalnum() also accepts accented letters, CJK characters, and superscript digits
    return ch.isascii() and ch.isalnum()


def is_alnum_words(value: str) -> bool:
    """Returns True if `value` starts with an ASCII alphanumeric character and contains only those and spaces."""
    if not value or not is_ascii_alnum(value[0]):
        return False
    return all(is_ascii_alnum(ch) or ch == " " for ch in value)


class Field:
    """
    Base class for validated single-value fields.

    Subclasses override `MESSAGE_CONSTRAINTS` and `is_valid()`.
    """

    MESSAGE_CONSTRAINTS = "Invalid value."

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not isinstance(value, str) or not self.is_valid(value):
            raise ConstraintViolation(self.MESSAGE_CONSTRAINTS)
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @staticmethod
    def is_valid(value: str) -> bool:
        return bool(value)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value


class Name(Field):
    MESSAGE_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"

    __slots__ = ()

    @staticmethod
    def is_valid(value: str) -> bool:
        return is_alnum_words(value)


class Phone(Field):
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"

    __slots__ = ()

    @staticmethod
    def is_valid(value: str) -> bool:
        # str.isdigit() also accepts superscripts and other unicode digits
        return len(value) >= 3 and all(ch in "0123456789" for ch in value)


class Level(Field):
    MESSAGE_CONSTRAINTS = "Levels should only contain alphanumeric characters and spaces, and it should not be blank"

    __slots__ = ()

    @staticmethod
    def is_valid(value: str) -> bool:
        return is_alnum_words(value)


class Remark(Field):
    MESSAGE_CONSTRAINTS = "Remarks can take any values, and it should not be blank"

    __slots__ = ()

    @staticmethod
    def is_valid(value: str) -> bool:
        return bool(value) and not value[0].isspace()
