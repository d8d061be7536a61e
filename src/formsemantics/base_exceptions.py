"""Base exception classes for formsemantics.

This module contains the root exception hierarchy that all other
formsemantics exceptions inherit from.
"""

from typing import Any


class FormSemanticsException(Exception):
    """Base exception for all formsemantics errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for programmatic handling
        context: Additional context information
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            error_code: Optional error code
            context: Optional context dictionary
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    @property
    def source(self) -> str | None:
        """Bundle file or text the error relates to, when known."""
        return self.context.get("source")

    def with_source(self, source: str) -> "FormSemanticsException":
        """Record the bundle source unless the error already names one.

        Returns:
            This exception, so callers can re-raise or report it directly
        """
        self.context.setdefault("source", source)
        return self
