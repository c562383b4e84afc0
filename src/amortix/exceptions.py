"""Custom exception classes for amortization errors.

This module defines the exception hierarchy used throughout the amortix package.
All exceptions inherit from AmortixException, which stores context information
about the failing computation alongside the message.
"""

from typing import Any


class AmortixException(Exception):
    """Base exception for all amortix errors.

    Attributes:
        message: Human-readable error description
        context: Additional context information about the error
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description
            context: Optional dictionary with additional error context
                    (e.g., convention, payments_per_year)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class ConventionError(AmortixException):
    """Exception raised for repayment convention errors.

    Example:
        >>> raise ConventionError(
        ...     "Convention cannot be registered twice",
        ...     context={"convention": "french"}
        ... )
    """


class UnsupportedConventionError(ConventionError):
    """Exception raised when a repayment convention tag is not recognized.

    This is the only validation performed by the schedule dispatcher. The
    offending tag appears verbatim in the message.

    Example:
        >>> raise UnsupportedConventionError(
        ...     "Unknown repayment convention: balloon",
        ...     context={"convention": "balloon", "supported": "french, german, american"}
        ... )
    """


class ConfigurationError(AmortixException):
    """Exception raised for configuration and input loading errors.

    This exception should be raised when:
    - A loan request file cannot be read or parsed
    - Initialization parameters are inconsistent

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid loan request file",
        ...     context={"path": "loan.json"}
        ... )
    """
