import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.actions.models import ActionEntry


# =============================================================================
# POST /action-entries
# =============================================================================

@pytest.mark.django_db
class TestCreateActionEntry:
    """Tests for POST /action-entries"""

    def test_create(self, authenticated_client, coffee, user):
        url = reverse('actions:entry-create')
        response = authenticated_client.post(url, {
            'voucherTemplateId': str(coffee.id),
            'occurredAt': '2024-03-10T08:30:00Z',
            'notes': 'With oat milk',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['voucherTemplateId'] == str(coffee.id)
        assert response.data['giverUserId'] == str(user.id)
        assert response.data['occurredAt'] == '2024-03-10T08:30:00Z'
        assert response.data['notes'] == 'With oat milk'

    def test_create_without_notes(self, authenticated_client, coffee):
        url = reverse('actions:entry-create')
        response = authenticated_client.post(url, {
            'voucherTemplateId': str(coffee.id),
            'occurredAt': '2024-03-10T08:30:00Z',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['notes'] is None

    def test_create_on_ended_goal(self, authenticated_client, ended_template):
        url = reverse('actions:entry-create')
        response = authenticated_client.post(url, {
            'voucherTemplateId': str(ended_template.id),
            'occurredAt': '2024-03-10T08:30:00Z',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'cannot create action entries for ended piggybank'
        assert ActionEntry.objects.count() == 0

    def test_create_unknown_template(self, authenticated_client):
        url = reverse('actions:entry-create')
        response = authenticated_client.post(url, {
            'voucherTemplateId': str(uuid.uuid4()),
            'occurredAt': '2024-03-10T08:30:00Z',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'voucher template not found'

    def test_create_on_other_couples_goal(self, outsider_client, coffee):
        url = reverse('actions:entry-create')
        response = outsider_client.post(url, {
            'voucherTemplateId': str(coffee.id),
            'occurredAt': '2024-03-10T08:30:00Z',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert ActionEntry.objects.count() == 0

    def test_create_invalid_occurred_at(self, authenticated_client, coffee):
        url = reverse('actions:entry-create')
        response = authenticated_client.post(url, {
            'voucherTemplateId': str(coffee.id),
            'occurredAt': 'yesterday',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'occurredAt' in response.data

    def test_create_invalid_template_id(self, authenticated_client):
        url = reverse('actions:entry-create')
        response = authenticated_client.post(url, {
            'voucherTemplateId': 'not-a-uuid',
            'occurredAt': '2024-03-10T08:30:00Z',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# GET /piggybanks/{id}/action-entries
# =============================================================================

@pytest.mark.django_db
class TestListActionEntries:
    """Tests for GET /piggybanks/{id}/action-entries"""

    def test_grouped_by_template(self, authenticated_client, piggybank, coffee, dinner, log_entry):
        old_coffee = log_entry(coffee, days_ago=3)
        new_coffee = log_entry(coffee, days_ago=1, notes='Espresso')
        dinner_entry = log_entry(dinner, days_ago=2)

        url = reverse('actions:piggybank-entries', kwargs={'piggybank_id': piggybank.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

        coffee_group, dinner_group = response.data
        assert coffee_group['voucherTemplateId'] == str(coffee.id)
        assert coffee_group['voucherTemplate'] == {
            'id': str(coffee.id),
            'title': 'Coffee',
            'description': None,
            'amountCents': 350,
        }
        assert [e['id'] for e in coffee_group['entries']] == [str(new_coffee.id), str(old_coffee.id)]
        assert coffee_group['entries'][0]['notes'] == 'Espresso'
        assert set(coffee_group['entries'][0]) == {'id', 'occurredAt', 'notes', 'createdAt'}

        assert [e['id'] for e in dinner_group['entries']] == [str(dinner_entry.id)]

    def test_templates_without_entries_omitted(self, authenticated_client, piggybank, coffee, dinner, log_entry):
        log_entry(dinner)

        url = reverse('actions:piggybank-entries', kwargs={'piggybank_id': piggybank.id})
        response = authenticated_client.get(url)

        assert [g['voucherTemplateId'] for g in response.data] == [str(dinner.id)]

    def test_empty(self, authenticated_client, piggybank):
        url = reverse('actions:piggybank-entries', kwargs={'piggybank_id': piggybank.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_other_couples_goal(self, outsider_client, piggybank):
        url = reverse('actions:piggybank-entries', kwargs={'piggybank_id': piggybank.id})
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# GET /piggybanks/{id}/stats
# =============================================================================

@pytest.mark.django_db
class TestPiggyBankStats:
    """Tests for GET /piggybanks/{id}/stats"""

    def test_stats_empty_goal(self, authenticated_client, piggybank):
        url = reverse('actions:piggybank-stats', kwargs={'piggybank_id': piggybank.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'totalActions': 0, 'totalValue': 0}

    def test_stats(self, authenticated_client, piggybank, coffee, dinner, partner, log_entry):
        log_entry(coffee)
        log_entry(coffee, giver=partner)
        log_entry(dinner)

        url = reverse('actions:piggybank-stats', kwargs={'piggybank_id': piggybank.id})
        response = authenticated_client.get(url)

        assert response.data == {'totalActions': 3, 'totalValue': 350 + 350 + 2500}

    def test_stats_ignore_other_goals(self, authenticated_client, piggybank, coffee, ended_template, log_entry):
        log_entry(coffee)
        log_entry(ended_template)

        url = reverse('actions:piggybank-stats', kwargs={'piggybank_id': piggybank.id})
        response = authenticated_client.get(url)

        assert response.data == {'totalActions': 1, 'totalValue': 350}

    def test_stats_other_couples_goal(self, outsider_client, piggybank):
        url = reverse('actions:piggybank-stats', kwargs={'piggybank_id': piggybank.id})
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
