"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidRequestError(DomainException):
    """Raised when a required request field is missing or blank."""

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, code="INVALID_REQUEST")


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseNotFoundError(LicenseException):
    """Raised when a license key is not in the store."""

    def __init__(self, message: str = "License key not found."):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class LicenseInactiveError(LicenseException):
    """Raised when a license exists but its status does not permit use."""

    def __init__(self, status: str, message: str = None):
        super().__init__(
            message or f"License key is inactive (status: {status}).",
            code="LICENSE_INACTIVE",
        )
        self.status = status


class DuplicateLicenseKeyError(LicenseException):
    """Raised when inserting a key that already exists."""

    def __init__(self, message: str = "License key already exists"):
        super().__init__(message, code="DUPLICATE_LICENSE_KEY")


class SessionException(DomainException):
    """Base exception for session binding errors."""

    pass


class SessionConflictError(SessionException):
    """Raised when a live session for the key is bound to another address."""

    def __init__(self, message: str = "License key is active on another network."):
        super().__init__(message, code="SESSION_CONFLICT")


class AdminException(DomainException):
    """Base exception for administrative command errors."""

    pass


class UnauthorizedAdminError(AdminException):
    """Raised when a non-authorized identity issues an admin command."""

    def __init__(self, message: str = "You are not authorized."):
        super().__init__(message, code="UNAUTHORIZED")


class UnknownAdminCommandError(AdminException):
    """Raised when admin input does not match any known command."""

    def __init__(self, message: str = "Unknown command."):
        super().__init__(message, code="UNKNOWN_COMMAND")


class PersistenceError(DomainException):
    """
    Raised when the record store is unreachable or a write fails.

    Kept apart from validation rejections so the transport layer
    can report it as a server fault.
    """

    def __init__(self, message: str = "Record store operation failed"):
        super().__init__(message, code="PERSISTENCE_ERROR")
