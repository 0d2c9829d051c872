"""
Accounts module exceptions.

These exceptions are raised by the credential store, the profile registry
and the account service, and are rendered by the API error handlers.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class DuplicateIdentifierError(ValidationError):
    """Raised when a username or email is already taken."""

    default_code = "DUPLICATE_IDENTIFIER"

    def __init__(self, field: str, value: str):
        super().__init__(
            "The username or email is already registered.",
            details={"field": field},
        )
        self.field = field
        self.value = value


class AccountNotFoundError(NotFoundError):
    """Raised when a user account does not exist."""

    default_code = "ACCOUNT_NOT_FOUND"

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            details={"user_id": user_id},
        )


class MissingFieldsError(ValidationError):
    """Raised when required request fields are absent or empty."""

    default_code = "MISSING_FIELDS"

    def __init__(self, fields: list[str]):
        super().__init__(
            "Required fields are missing: " + ", ".join(fields),
            details={"fields": fields},
        )


class WeakPasswordError(ValidationError):
    """Raised when a new password is shorter than the configured minimum."""

    default_code = "INVALID_PASSWORD"

    def __init__(self, min_length: int):
        super().__init__(
            f"The new password must be at least {min_length} characters long.",
            details={"min_length": min_length},
        )


class IncorrectPasswordError(AuthorizationError):
    """Raised when the current password supplied for a change is wrong."""

    default_code = "INVALID_PASSWORD"

    def __init__(self):
        super().__init__("The current password is incorrect.")


class UnknownPlayerError(NotFoundError):
    """Raised when no account matches a public username lookup."""

    default_code = "USER_NOT_FOUND"

    def __init__(self, username: str):
        super().__init__("User not found.", details={"username": username})
        self.username = username
