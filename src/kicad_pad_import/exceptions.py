"""Exception hierarchy for footprint import failures.

Each failure kind gets its own type and error code so callers can tell a
broken file apart from a valid file that simply has nothing to import.
"""

from __future__ import annotations

from typing import Any


class PadImportError(Exception):
    """Base exception for all pad import errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a serializable dict."""
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


class FootprintParseError(PadImportError):
    """Raised when the S-expression text cannot be turned into a tree."""

    error_code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        position: int | None = None,
        error_code: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, error_code or self.error_code, position=position, **kwargs)


class UnexpectedEndOfInput(FootprintParseError):
    """Raised when the input ends inside a token, string or list."""

    error_code = "UNEXPECTED_END_OF_INPUT"


class MalformedNode(FootprintParseError):
    """Raised when the root list is missing its opening paren or its name."""

    error_code = "MALFORMED_NODE"


class NestingLimitExceeded(FootprintParseError):
    """Raised when lists nest deeper than the configured maximum."""

    error_code = "NESTING_LIMIT_EXCEEDED"

    def __init__(
        self, message: str, position: int | None = None, max_depth: int | None = None, **kwargs: Any
    ):
        super().__init__(message, position, max_depth=max_depth, **kwargs)


class NoPadsFound(PadImportError):
    """Raised when a well-formed footprint has no pad nodes at all."""

    error_code = "NO_PADS_FOUND"

    def __init__(self, message: str, source: str | None = None, **kwargs: Any):
        super().__init__(message, "NO_PADS_FOUND", source=source, **kwargs)


class UnsupportedShape(PadImportError):
    """Raised for a pad shape that has no roundness mapping (trapezoid, custom)."""

    error_code = "UNSUPPORTED_SHAPE"

    def __init__(
        self, message: str, shape: str | None = None, pad_name: str | None = None, **kwargs: Any
    ):
        super().__init__(message, "UNSUPPORTED_SHAPE", shape=shape, pad_name=pad_name, **kwargs)


class InvalidFieldValue(PadImportError):
    """Raised when a present numeric field does not hold a number."""

    error_code = "INVALID_FIELD_VALUE"

    def __init__(
        self, message: str, field: str | None = None, value: str | None = None, **kwargs: Any
    ):
        super().__init__(message, "INVALID_FIELD_VALUE", field=field, value=value, **kwargs)


class FootprintLoadError(PadImportError):
    """Raised when a footprint file cannot be located, read or decoded."""

    error_code = "FOOTPRINT_LOAD_ERROR"

    def __init__(self, message: str, path: str | None = None, **kwargs: Any):
        super().__init__(message, "FOOTPRINT_LOAD_ERROR", path=path, **kwargs)


class SecurityError(PadImportError):
    """Raised when a footprint path fails validation."""

    error_code = "SECURITY_ERROR"

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, "SECURITY_ERROR", **kwargs)


__all__ = [
    "PadImportError",
    "FootprintParseError",
    "UnexpectedEndOfInput",
    "MalformedNode",
    "NestingLimitExceeded",
    "NoPadsFound",
    "UnsupportedShape",
    "InvalidFieldValue",
    "FootprintLoadError",
    "SecurityError",
]
