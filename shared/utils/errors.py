"""
Wellness Shared Errors
Custom exception classes
"""

from typing import Any, Dict, Optional


class WellnessException(Exception):
    """Base exception for the wellness services"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(WellnessException):
    """Resource not found error (404)"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=404, details=details)


class AuthenticationError(WellnessException):
    """Authentication error (401)"""

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=401, details=details)


class AuthorizationError(WellnessException):
    """Authorization error (403)"""

    def __init__(
        self,
        message: str = "Permission denied",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=403, details=details)


class SeriesTypeMismatchError(WellnessException):
    """
    Row data could not be read under the declared series type (500)

    This is a contract violation between a query and its caller,
    never a user input problem.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)
