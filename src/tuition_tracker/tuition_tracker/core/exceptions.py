class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when no student exists for the given identifier."""


class StorageError(DomainError):
    """Raised when the underlying database fails."""


class NetworkError(DomainError):
    """Raised when the HTTP client cannot reach the API."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
