"""Custom exceptions for pwnedcheck.

All exceptions inherit from PwnedCheckError with context fields
for better error tracking and debugging. Context never carries the
checked password or the withheld part of its digest.
"""

from typing import Any


class PwnedCheckError(Exception):
    """Base exception for all pwnedcheck errors.

    Includes context dict for structured error information.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class CompromisedError(PwnedCheckError):
    """Raised when a password was found in the breach corpus.

    Not an infrastructure failure: the password is unsafe to use.
    """

    def __init__(self, count: int) -> None:
        super().__init__(f"Password has been pwned {count} times", count=count)
        self.count = count


class TransportError(PwnedCheckError):
    """Raised when the range query could not be completed."""

    pass


class ParseError(PwnedCheckError):
    """Raised when a range query or its response cannot be interpreted."""

    pass


class ConfigurationError(PwnedCheckError):
    """Raised when configuration is invalid or missing."""

    pass
