"""Errors that short-circuit a request before any outbound call"""
from typing import Optional


class AppError(Exception):
    """Base error rendered as {"error": message} with its status code"""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required submission field is missing or blank"""

    status_code = 400
    message = "Missing required fields"


class ConfigurationError(AppError):
    """Required server-side setup is absent"""

    status_code = 500
    message = "Server configuration error"
