import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.accounts.models import User
from apps.couples.models import CoupleRequest


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        name='Test User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')
    return api_client


@pytest.fixture
def invitation(db, user):
    """Pending couple request sent by user to an address without an account."""
    return CoupleRequest.objects.create(requester=user, target_email='invitee@example.com')
