"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UserNotFoundError(UserError):
    """Raised when the requested user cannot be found."""


class UserCreationError(UserError):
    """Raised when the auth user or its profile cannot be created."""


class AuthVendorError(UserError):
    """Raised by the auth gateway when the vendor call fails."""


class InvalidCredentialsError(UserError):
    """Raised when the auth vendor rejects an email/password pair."""


class AuthNotConfiguredError(UserError):
    """Raised when the auth vendor credentials are missing."""
