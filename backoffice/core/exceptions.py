class BackofficeException(Exception):
    """Base exception for the back-office API"""

    category = "error"


class UnauthorizedException(BackofficeException):
    """Raised when JWT validation fails"""

    category = "unauthorized"


class NotFoundException(BackofficeException):
    """Raised when resource not found"""

    category = "not_found"


class ForbiddenException(BackofficeException):
    """Raised when the principal's role or ownership chain does not allow the request"""

    category = "forbidden"


class ConflictException(BackofficeException):
    """Raised when a uniqueness or overlap rule would be violated"""

    category = "conflict"


class AgeRangeOverlapException(ConflictException):
    """Raised when a candidate age range overlaps an existing one"""

    def __init__(self, range_name: str, min_age: int, max_age: int):
        self.range_name = range_name
        self.min_age = min_age
        self.max_age = max_age
        super().__init__(
            f'Age range overlaps with "{range_name}" ({min_age}-{max_age} years)'
        )


class ValidationException(BackofficeException):
    """Raised for business logic validation errors"""

    category = "invalid_input"


class StorageException(BackofficeException):
    """Raised when the image file store fails"""

    category = "storage_error"
