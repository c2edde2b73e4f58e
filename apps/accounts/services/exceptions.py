"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class RegistrationValidationError(AccountsServiceError):
    """Base for registration input that fails validation."""
    pass


class EmailRequiredError(RegistrationValidationError):
    """Raised when no email address is supplied."""
    pass


class InvalidEmailError(RegistrationValidationError):
    """Raised when the email address is malformed."""
    pass


class PasswordTooShortError(RegistrationValidationError):
    """Raised when the password is below the minimum length."""
    pass


class NameRequiredError(RegistrationValidationError):
    """Raised when the display name is blank."""
    pass


class EmailAlreadyRegisteredError(RegistrationValidationError):
    """Raised when an account already uses the email address."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class InvalidInvitationTokenError(AccountsServiceError):
    """Raised when an invitation token matches no couple request."""
    pass


class InvitationEmailMismatchError(AccountsServiceError):
    """Raised when the registrant's email differs from the invited address."""
    pass


class InvitationAlreadyClaimedError(AccountsServiceError):
    """Raised when the invitation was already bound to an account."""
    pass
