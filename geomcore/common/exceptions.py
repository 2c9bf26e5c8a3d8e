from enum import StrEnum
from typing import Any, Final


class GeometryErrorReason(StrEnum):
    INVALID_ARGUMENT: Final[str] = "invalid_argument"
    DEGENERATE: Final[str] = "degenerate"
    INVALID_CONFIGURATION: Final[str] = "invalid_configuration"


class GeometryError(Exception):
    """
    Base class for all failures raised by geomcore.
    """
    reason: GeometryErrorReason
    message: str
    operand: str | None  # which input caused the failure, e.g. "line2.direction"
    detail: dict[str, Any]

    def __init__(
        self,
        reason: GeometryErrorReason,
        message: str,
        operand: str | None = None,
        detail: dict[str, Any] | None = None,
        *args
    ):
        super().__init__(message, *args)
        self.reason = reason
        self.message = message
        self.operand = operand
        self.detail = dict() if detail is None else dict(detail)

    def __str__(self) -> str:
        if self.operand is None:
            return self.message
        return f"{self.message} (operand: {self.operand})"


class InvalidArgumentError(GeometryError):
    def __init__(
        self,
        message: str,
        operand: str | None = None,
        detail: dict[str, Any] | None = None,
        *args
    ):
        super().__init__(GeometryErrorReason.INVALID_ARGUMENT, message, operand, detail, *args)


class DegenerateError(GeometryError):
    def __init__(
        self,
        message: str,
        operand: str | None = None,
        detail: dict[str, Any] | None = None,
        *args
    ):
        super().__init__(GeometryErrorReason.DEGENERATE, message, operand, detail, *args)


class GeometryConfigurationError(GeometryError):
    def __init__(
        self,
        message: str,
        operand: str | None = None,
        detail: dict[str, Any] | None = None,
        *args
    ):
        super().__init__(GeometryErrorReason.INVALID_CONFIGURATION, message, operand, detail, *args)
