"""
Schemas
File: errors.py

Purpose: Error taxonomy for the HTTP template.
Defines the error kinds with their numeric codes, a Pydantic model for
structured error communication and the exception used for control flow.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Kinds (Machine-Readable Codes)
# =============================================================================

class HttpErrorKind(Enum):
    """Stable numeric error codes and their canonical messages."""

    RESPONSE_IS_EMPTY = (1001, "response is empty")
    RESPONSE_STATUS_CODE_INVALID = (1002, "response status code invalid")
    UNSUPPORTED_REQUEST_METHOD = (1003, "unsupported request method")
    CLOSE_CHANNEL_ERROR = (1004, "close channel error")
    SYSTEM_INTERNAL_ERROR = (9999, "system internal error")

    @property
    def error_code(self) -> int:
        return self.value[0]

    @property
    def error_message(self) -> str:
        return self.value[1]

    @classmethod
    def from_code(cls, code: int) -> "HttpErrorKind | None":
        for kind in cls:
            if kind.error_code == code:
                return kind
        return None


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class HttpError(BaseModel):
    """
    Structured form of an HttpException.

    Used when a failure has to be reported or serialized rather than raised
    (e.g. the CLI's JSON output).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: int = Field(
        ...,
        description="Stable numeric error code",
        examples=[HttpErrorKind.RESPONSE_IS_EMPTY.error_code],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "HttpException":
        """Convert this error model to a raisable exception."""
        return HttpException(
            code=self.code,
            message=self.message,
            details=dict(self.details),
        )


# =============================================================================
# Python Exception (Control Flow)
# =============================================================================

class HttpException(Exception):
    """
    The single failure type raised by HttpTemplate.

    Carries a numeric code and message. Build it from an HttpErrorKind to get
    the canonical code and message, or from an explicit code/message pair.
    """

    def __init__(
        self,
        kind: HttpErrorKind | None = None,
        *,
        code: int | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if kind is None and code is None:
            raise TypeError("HttpException requires a kind or a code")
        if kind is None:
            kind = HttpErrorKind.from_code(code)
        if code is None:
            code = kind.error_code
        if message is None:
            message = kind.error_message if kind is not None else f"error {code}"
        super().__init__(message)
        self.kind = kind
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> HttpError:
        """Convert this exception to an HttpError model."""
        return HttpError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"
