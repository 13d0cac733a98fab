"""
Custom Exception Classes for content negotiation

This module defines custom exceptions for better error handling and
consistent error responses across the application.
"""

from typing import Any

from fastapi import status


class NegotiationError(Exception):
    """Base exception class for all negotiation-related exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Programmer Errors
# ============================================================================


class InvalidInputError(NegotiationError):
    """Raised when the quality comparator is handed a missing value"""

    def __init__(self, message: str = "Invalid comparator input", argument: str | None = None):
        details = {"argument": argument} if argument else {}
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)


# ============================================================================
# Negotiation Outcomes
# ============================================================================


class NotAcceptableError(NegotiationError):
    """Raised when none of the supported values is acceptable to the client"""

    def __init__(self, header: str, supported: list[str]):
        super().__init__(
            message=f"None of the supported values satisfies the {header} header",
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            details={"header": header, "supported": supported},
        )
