from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.accounts.models import User
from apps.couples.models import Couple
from apps.piggybanks.models import PiggyBank


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
    return User.objects.create_user(email='alice@example.com', password='password123', name='Alice')


@pytest.fixture
def partner(db):
    return User.objects.create_user(email='bob@example.com', password='password123', name='Bob')


@pytest.fixture
def outsider(db):
    """User belonging to a different couple."""
    return User.objects.create_user(email='carol@example.com', password='password123', name='Carol')


@pytest.fixture
def single_user(db):
    """User without a couple."""
    return User.objects.create_user(email='erin@example.com', password='password123', name='Erin')


@pytest.fixture
def couple(db, user, partner):
    return Couple.objects.create(partner1=user, partner2=partner)


@pytest.fixture
def other_couple(db, outsider):
    dave = User.objects.create_user(email='dave@example.com', password='password123', name='Dave')
    return Couple.objects.create(partner1=outsider, partner2=dave)


@pytest.fixture
def authenticated_client(make_client, user, couple):
    return make_client(user)


@pytest.fixture
def partner_client(make_client, partner, couple):
    return make_client(partner)


@pytest.fixture
def outsider_client(make_client, outsider, other_couple):
    return make_client(outsider)


@pytest.fixture
def piggybank(db, couple):
    """Open goal of the couple."""
    return PiggyBank.objects.create(
        couple=couple,
        title='Holiday',
        description='Two weeks by the sea',
        start_date=timezone.now() - timedelta(days=10),
    )


@pytest.fixture
def ended_piggybank(db, couple):
    """Goal whose end date has passed."""
    return PiggyBank.objects.create(
        couple=couple,
        title='Last year',
        start_date=timezone.now() - timedelta(days=400),
        end_date=timezone.now() - timedelta(days=1),
    )
