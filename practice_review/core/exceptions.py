"""
Custom exceptions for Practice Review

Pattern: Domain-specific exceptions for proper error handling
Allows services to propagate errors to UI layer.
"""


class PracticeReviewError(Exception):
    """Base exception for all practice review errors"""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ValidationError(PracticeReviewError):
    """Input validation failed"""

    def __init__(self, message: str, field: str = None, value: any = None):
        self.field = field
        self.value = value
        details = f"field={field}, value={value!r}" if field else None
        super().__init__(message, details)


class PersistenceError(PracticeReviewError):
    """A repository call failed or reported failure"""
    pass


class LoadError(PracticeReviewError):
    """Initial record fetch failed"""
    pass


class RecordNotFoundError(PracticeReviewError):
    """Record with given ID not found"""
    pass


__all__ = [
    'PracticeReviewError',
    'ValidationError',
    'PersistenceError',
    'LoadError',
    'RecordNotFoundError',
]
