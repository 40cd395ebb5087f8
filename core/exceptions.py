"""
Exceptions raised by the quick input service.
Each carries the error code the API reports to clients.
"""
from typing import Any, Dict, Optional


class QuickInputException(Exception):
    """Base exception for quick input errors."""

    code = "QUICK_INPUT_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            message: Client-facing error message
            details: Extra context for logs (input text, lengths, ...)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(QuickInputException):
    """Quick input is missing, blank or longer than allowed."""

    code = "INVALID_INPUT"


class ParsingError(QuickInputException):
    """No usable amount in the quick input text."""

    code = "PARSE_ERROR"


class ConfigurationError(QuickInputException):
    """Settings failed validation at startup."""

    code = "CONFIG_ERROR"
