"""
Sweeper Custom Exceptions

Centralized exception classes for error handling.
"""


class SweeperBaseException(Exception):
    """Base exception for all Sweeper errors."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationError(SweeperBaseException):
    """Input validation failed."""
    pass


class InvalidUrlPatternError(ValidationError):
    """Custom URL pattern is not a domain or URL."""
    pass


class InvalidKeywordError(ValidationError):
    """Custom keyword is empty or malformed."""
    pass


# ============================================================================
# Custom Rule Exceptions
# ============================================================================

class RuleConflictError(SweeperBaseException):
    """Custom rule already exists."""
    pass


class RuleNotFoundError(SweeperBaseException):
    """Custom rule does not exist."""
    pass


class RuleStorageError(SweeperBaseException):
    """Custom rules file could not be written."""
    pass
