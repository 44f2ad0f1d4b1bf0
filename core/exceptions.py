# core/exceptions.py

"""
Exception hierarchy for the Roster Manager.

Parse errors are raised before any change reaches the `Model`; command errors are raised
by a command that cannot be applied to the current roster. Both are recoverable at the
shell boundary, where `LogicManager` converts them into a failed `Response`.
"""


class RosterError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConstraintViolation(RosterError, ValueError):
    """Raised when a value type is constructed from input that fails its validation rule."""

    pass


class ParseError(RosterError):
    """Raised when user input does not conform to the expected command format."""

    pass


class CommandError(RosterError):
    """Raised when a command is semantically invalid against the current roster state."""

    pass
