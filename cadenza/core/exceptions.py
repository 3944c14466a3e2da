"""
Custom Exceptions - Application-specific error types
"""


class CadenzaException(Exception):
    """Base exception for all habit engine errors"""
    pass


class NotFoundError(CadenzaException):
    """Raised when an operation references an id absent from its collection"""
    pass


class HabitNotFoundError(NotFoundError):
    """Raised when a habit cannot be found"""
    pass


class CategoryNotFoundError(NotFoundError):
    """Raised when a category cannot be found"""
    pass


class DuplicateIdError(CadenzaException):
    """Raised when inserting an item whose id is already present"""
    pass


class InvariantViolation(CadenzaException):
    """Raised when a habit is found in a state that should be impossible"""
    pass
