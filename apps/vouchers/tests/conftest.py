from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.accounts.models import User
from apps.couples.models import Couple
from apps.piggybanks.models import PiggyBank
from apps.vouchers.models import VoucherTemplate


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
    """User without access to the couple's goals."""
    return User.objects.create_user(email='carol@example.com', password='password123', name='Carol')


@pytest.fixture
def couple(db, user, partner):
    return Couple.objects.create(partner1=user, partner2=partner)


@pytest.fixture
def authenticated_client(make_client, user, couple):
    return make_client(user)


@pytest.fixture
def outsider_client(make_client, outsider):
    return make_client(outsider)


@pytest.fixture
def piggybank(db, couple):
    return PiggyBank.objects.create(
        couple=couple,
        title='Holiday',
        start_date=timezone.now() - timedelta(days=10),
    )


@pytest.fixture
def template(db, piggybank):
    return VoucherTemplate.objects.create(
        piggybank=piggybank,
        title='Breakfast in bed',
        description='Weekend only',
        amount_cents=1500,
    )
