"""
Custom exceptions for Vyakarana library.

All exceptions inherit from VyakaranaError for easy catching of library-specific errors.

Malformed linguistic input is never reported through these exceptions: the
public analysis functions return structured "invalid" results instead.
"""

from typing import Any


class VyakaranaError(Exception):
    """Base exception for all Vyakarana errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ConfigurationError(VyakaranaError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name


class InvalidInputError(VyakaranaError):
    """Raised when an argument has the wrong type or is empty."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["type"] = type(value).__name__
        super().__init__(message, ctx)
        self.argument = argument
        self.value = value


class ReferenceDataError(VyakaranaError):
    """Raised when bundled reference data cannot be loaded or is inconsistent."""

    def __init__(
        self,
        message: str = "Failed to load reference data.",
        table: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if table:
            ctx["table"] = table
        super().__init__(message, ctx)
        self.table = table
