"""User authentication service."""

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.tokens import AccessToken

from .exceptions import (
    InvalidCredentialsError,
    InactiveAccountError,
    AccountsServiceError,
)
from .user_registration import validate_email_address

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        email = validate_email_address(email)
    except AccountsServiceError:
        raise InvalidCredentialsError("invalid credentials")

    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("invalid credentials")

    if not user.check_password(password):
        raise InvalidCredentialsError("invalid credentials")

    if not user.is_active:
        raise InactiveAccountError("account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user


def issue_access_token(user: User) -> str:
    """Signed access token carrying sub, iat and exp claims."""
    return str(AccessToken.for_user(user))
