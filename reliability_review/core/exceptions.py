from typing import Optional, Dict, Any

class ReviewException(Exception):
    """Base exception for all reliability review errors."""
    def __init__(
        self,
        message: str,
        code: str = "internal_error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

class ConfigurationError(ReviewException):
    """Raised when application configuration is invalid or missing."""
    def __init__(self, message: str, code: str = "config_error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)

class MalformedResourceError(ReviewException):
    """Raised when a provider resource descriptor lacks a field the analyzers require."""
    def __init__(self, message: str, code: str = "malformed_resource", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)
