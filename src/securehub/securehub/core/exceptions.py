class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidCredentials(AuthenticationError):
    """No account matches the submitted identifier and password."""

    def __init__(self, message: str = "Invalid credentials. Please check your ID and password."):
        super().__init__(message)


class NetworkRestricted(AuthorizationError):
    """Staff action attempted from an address outside the allow-list."""

    def __init__(self, message: str = "Staff access is restricted to authorized networks only."):
        super().__init__(message)


class ProtectedAccount(AuthorizationError):
    """The reserved administrator account cannot be deleted."""

    def __init__(self, message: str = "The primary admin account cannot be deleted."):
        super().__init__(message)


class DuplicateIdentifier(ValidationError):
    def __init__(self, identifier: str):
        super().__init__(f"User ID already exists: {identifier}")
        self.identifier = identifier


class DuplicateAddress(ValidationError):
    def __init__(self, address: str):
        super().__init__(f"This IP is already on the whitelist: {address}")
        self.address = address


class LookupFailed(DomainError):
    """Public IP lookup service unreachable or returned garbage."""


class StoreFailed(DomainError):
    """Record store read or write failed."""
