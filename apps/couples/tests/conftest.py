import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.accounts.models import User
from apps.couples.models import Couple, CoupleRequest


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_client():
    """Return a factory building clients that carry a Bearer token for a user."""
    def _make(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')
        return client
    return _make


@pytest.fixture
def user(db):
    """Create and return the inviting user."""
    return User.objects.create_user(
        email='alice@example.com',
        password='password123',
        name='Alice',
    )


@pytest.fixture
def partner(db):
    """Create and return the invited user."""
    return User.objects.create_user(
        email='bob@example.com',
        password='password123',
        name='Bob',
    )


@pytest.fixture
def third_user(db):
    """Create and return a user outside the couple."""
    return User.objects.create_user(
        email='carol@example.com',
        password='password123',
        name='Carol',
    )


@pytest.fixture
def authenticated_client(make_client, user):
    return make_client(user)


@pytest.fixture
def partner_client(make_client, partner):
    return make_client(partner)


@pytest.fixture
def third_client(make_client, third_user):
    return make_client(third_user)


@pytest.fixture
def pending_request(db, user, partner):
    """Pending request from user to partner."""
    return CoupleRequest.objects.create(requester=user, target_user=partner)


@pytest.fixture
def email_request(db, user):
    """Pending request from user to an address without an account."""
    return CoupleRequest.objects.create(requester=user, target_email='dave@example.com')


@pytest.fixture
def couple(db, user, partner):
    """Existing couple of user and partner."""
    return Couple.objects.create(partner1=user, partner2=partner)


@pytest.fixture
def emails_enabled(settings):
    """Turn invitation emails on with the in-memory backend."""
    settings.INVITATION_EMAILS_ENABLED = True
    settings.INVITATION_EMAILS_ASYNC = False
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
    settings.FRONTEND_BASE_URL = 'https://app.example.com'
    return settings
