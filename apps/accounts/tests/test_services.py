"""
Service layer unit tests for accounts app.

Tests cover:
- Registration validation order
- Authentication outcomes
- Invitation binding atomicity
"""

from unittest.mock import patch

import pytest

from apps.accounts.models import User
from apps.accounts.services import (
    register_user,
    authenticate_user,
    register_with_invitation,
)
from apps.accounts.services.exceptions import (
    EmailRequiredError,
    InvalidEmailError,
    PasswordTooShortError,
    NameRequiredError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvitationEmailMismatchError,
    InvitationAlreadyClaimedError,
)
from apps.couples.services.exceptions import InvitationTargetAlreadyBoundError


@pytest.mark.django_db
class TestRegisterUser:

    def test_register_hashes_password(self):
        user = register_user(email='a@example.com', password='password123', name='A')

        assert user.password != 'password123'
        assert user.check_password('password123')

    def test_register_strips_name(self):
        user = register_user(email='a@example.com', password='password123', name='  A  ')
        assert user.name == 'A'

    def test_blank_email(self):
        with pytest.raises(EmailRequiredError):
            register_user(email='  ', password='password123', name='A')

    def test_malformed_email(self):
        with pytest.raises(InvalidEmailError):
            register_user(email='a@', password='password123', name='A')

    def test_short_password(self):
        with pytest.raises(PasswordTooShortError):
            register_user(email='a@example.com', password='pass', name='A')

    def test_blank_name(self):
        with pytest.raises(NameRequiredError):
            register_user(email='a@example.com', password='password123', name='')

    def test_duplicate_email(self, user):
        with pytest.raises(EmailAlreadyRegisteredError):
            register_user(email='TESTUSER@example.com', password='password123', name='A')

    def test_email_checked_before_password(self):
        with pytest.raises(InvalidEmailError):
            register_user(email='bad', password='x', name='')


@pytest.mark.django_db
class TestAuthenticateUser:

    def test_success(self, user):
        assert authenticate_user(email='testuser@example.com', password='TestPass123!') == user

    def test_malformed_email_is_invalid_credentials(self, db):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='nope', password='TestPass123!')

    def test_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email='inactive@example.com', password='TestPass123!')

    def test_inactive_with_wrong_password(self, user_inactive):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='inactive@example.com', password='wrong-password')


@pytest.mark.django_db
class TestUserManager:

    def test_get_by_email_normalizes(self, user):
        assert User.objects.get_by_email(' TestUser@Example.com ') == user

    def test_get_by_email_missing(self, db):
        with pytest.raises(User.DoesNotExist):
            User.objects.get_by_email('missing@example.com')

    def test_get_by_id(self, user):
        assert User.objects.get_by_id(user.id) == user

    def test_create_superuser(self, db):
        admin = User.objects.create_superuser(email='admin@example.com', password='password123')
        assert admin.is_staff
        assert admin.is_superuser
        assert admin.name == 'Administrator'


@pytest.mark.django_db
class TestRegisterWithInvitation:

    def test_already_bound_rolls_back_user(self, invitation):
        """A lost binding race leaves no orphaned account behind."""
        with patch(
            'apps.accounts.services.invitation_registration.bind_invitation_target',
            side_effect=InvitationTargetAlreadyBoundError('invitation already bound to a user'),
        ):
            with pytest.raises(InvitationAlreadyClaimedError):
                register_with_invitation(
                    email='invitee@example.com',
                    password='password123',
                    name='Invitee',
                    invitation_token=invitation.invitation_token,
                )

        assert not User.objects.filter(email='invitee@example.com').exists()

    def test_claimed_invitation_cannot_be_reused(self, invitation):
        register_with_invitation(
            email='invitee@example.com',
            password='password123',
            name='Invitee',
            invitation_token=invitation.invitation_token,
        )

        with pytest.raises(InvitationEmailMismatchError):
            register_with_invitation(
                email='invitee@example.com',
                password='password123',
                name='Invitee Again',
                invitation_token=invitation.invitation_token,
            )
