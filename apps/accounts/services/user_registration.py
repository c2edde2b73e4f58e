"""User registration service."""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import transaction

from apps.accounts.models import normalize_email_address

from .exceptions import (
    EmailRequiredError,
    InvalidEmailError,
    PasswordTooShortError,
    NameRequiredError,
    EmailAlreadyRegisteredError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def validate_email_address(email: str) -> str:
    """
    Check an email address and return it normalised.

    Raises:
        EmailRequiredError: If the address is blank
        InvalidEmailError: If the address is malformed
    """
    email = normalize_email_address(email)
    if not email:
        raise EmailRequiredError("email is required")

    try:
        validate_email(email)
    except ValidationError:
        raise InvalidEmailError("invalid email format")

    return email


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    name: str
) -> User:
    """
    Register a new user.

    Args:
        email: User's email address (trimmed and lower-cased)
        password: User's password (will be hashed)
        name: Display name, required

    Returns:
        Created User instance

    Raises:
        EmailRequiredError, InvalidEmailError: If the email is unusable
        PasswordTooShortError: If password is shorter than PASSWORD_MIN_LENGTH
        NameRequiredError: If name is blank
        EmailAlreadyRegisteredError: If an account already uses the email
    """
    email = validate_email_address(email)

    if len(password or '') < settings.PASSWORD_MIN_LENGTH:
        raise PasswordTooShortError(
            f"password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
        )

    name = (name or '').strip()
    if not name:
        raise NameRequiredError("name is required")

    if User.objects.filter(email=email).exists():
        raise EmailAlreadyRegisteredError("email already registered")

    user = User.objects.create_user(email=email, password=password, name=name)
    logger.info("Registered user %s", user.id)
    return user
