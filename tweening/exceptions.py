"""
Exception hierarchy for tweening.

Every failure raised by the library derives from TweeningException and
carries a ``details`` dict describing the offending argument.
"""

from typing import Any, Dict, Optional


class TweeningException(Exception):
    """Base exception for all tweening errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class InvalidArgumentError(TweeningException, ValueError):
    """An argument or configuration value is missing or out of range."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        details = kwargs.copy()
        if parameter:
            details["parameter"] = parameter
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.parameter = parameter


class IndexOutOfRangeError(TweeningException, IndexError):
    """An index does not address an existing element."""

    def __init__(self, message: str, index: Optional[int] = None,
                 size: Optional[int] = None, **kwargs):
        details = kwargs.copy()
        if index is not None:
            details["index"] = index
        if size is not None:
            details["size"] = size
        super().__init__(message, details)
        self.index = index


__all__ = [
    "TweeningException",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
]
