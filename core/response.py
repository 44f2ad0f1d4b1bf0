# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Validation Failures ===
    # input structure is malformed or incomplete
    INVALID_INPUT = "INVALID_INPUT"

    # field value is out of bounds or incorrectly formatted
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # the input is well-formed, but cannot be applied to the current roster
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Standard Response object returned across the logic/CLI boundary.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation, shown to the user.
        error (ErrorCode | None): Optional machine-readable error identifier.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(cls, detail: str | None = None, data: dict | None = None) -> Response:
        return cls(success=True, detail=detail, error=None, data=data)

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | None = None,
        data: dict | None = None,
    ) -> Response:
        return cls(success=False, detail=detail, error=error, data=data)

    # === dunder methods ===

    def __repr__(self) -> str:
        error_str = self._error.value if self._error else None
        return f"Response({self._success}, {error_str}, {self._detail!r})"

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"
        else:
            error_str = self.error.value if isinstance(self.error, Enum) else ""
            return f"Error: {error_str}"
