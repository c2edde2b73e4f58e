"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    RegistrationValidationError,
    EmailRequiredError,
    InvalidEmailError,
    PasswordTooShortError,
    NameRequiredError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidInvitationTokenError,
    InvitationEmailMismatchError,
    InvitationAlreadyClaimedError,
)
from .user_registration import register_user, validate_email_address
from .user_authentication import authenticate_user, issue_access_token
from .invitation_registration import register_with_invitation

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'RegistrationValidationError',
    'EmailRequiredError',
    'InvalidEmailError',
    'PasswordTooShortError',
    'NameRequiredError',
    'EmailAlreadyRegisteredError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidInvitationTokenError',
    'InvitationEmailMismatchError',
    'InvitationAlreadyClaimedError',
    # Services
    'register_user',
    'validate_email_address',
    'authenticate_user',
    'issue_access_token',
    'register_with_invitation',
]
