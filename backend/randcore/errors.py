"""Error codes and exceptions for fatal generation failures."""
from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Fatal error codes. Everything else degrades to a warning."""

    ENTROPY_UNAVAILABLE = "ENTROPY_UNAVAILABLE"
    INVALID_RANGE = "INVALID_RANGE"
    RANGE_TOO_LARGE = "RANGE_TOO_LARGE"


# Environment errors may clear on another host; programmer errors will not.
ERROR_RECOVERABLE: dict[ErrorCode, bool] = {
    ErrorCode.ENTROPY_UNAVAILABLE: True,
    ErrorCode.INVALID_RANGE: False,
    ErrorCode.RANGE_TOO_LARGE: False,
}

USER_MESSAGE = "Generation unavailable in this environment."


class ErrorBody(BaseModel):
    """User-facing error shape."""

    code: str
    message: str
    recoverable: bool


class GenerationError(Exception):
    """Base error that aborts a whole generate() call."""

    code: ErrorCode = ErrorCode.INVALID_RANGE

    def __init__(self, message: str | None = None):
        self.message = message or f"Error: {self.code.value}"
        self.recoverable = ERROR_RECOVERABLE[self.code]
        super().__init__(self.message)

    def to_body(self) -> ErrorBody:
        """
        Convert to the user-visible body.

        The developer detail stays on the exception; users only ever see
        USER_MESSAGE.
        """
        return ErrorBody(
            code=self.code.value,
            message=USER_MESSAGE,
            recoverable=self.recoverable,
        )


class EntropyUnavailable(GenerationError):
    """Secure-mode CSPRNG is missing for a security-sensitive call."""

    code = ErrorCode.ENTROPY_UNAVAILABLE


class InvalidRange(GenerationError, ValueError):
    """Range endpoints are not finite integers."""

    code = ErrorCode.INVALID_RANGE


class RangeTooLarge(GenerationError, ValueError):
    """Range size exceeds the 2^53 - 1 safe-integer envelope."""

    code = ErrorCode.RANGE_TOO_LARGE
