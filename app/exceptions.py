# app/exceptions.py
from typing import Any, Dict, Optional


def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response


class EmployeeServiceError(Exception):
    """Base class for errors raised by the employee service."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmployeeNotFoundError(EmployeeServiceError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee not found with id: {employee_id}")


class InvalidPageRequestError(EmployeeServiceError):
    """Raised for page/sort query parameters that cannot be applied."""
