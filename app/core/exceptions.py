"""
Domain exceptions raised by the services and translated to HTTP errors by the routers.
"""


class FlashcardsError(Exception):
    """Base exception for all flashcard service errors."""
    pass


class ValidationError(FlashcardsError):
    """Raised when a payload is missing a required field or carries a bad value."""
    pass


class NotFoundError(FlashcardsError):
    """Raised when a referenced set does not exist."""
    pass


class ConflictError(FlashcardsError):
    """Raised when a record already exists (e.g. a duplicate favorite)."""
    pass
