"""Service layer unit tests for actions app."""

from datetime import timedelta
from uuid import uuid4

import pytest
from django.utils import timezone

from apps.actions.models import ActionEntry
from apps.actions.services import (
    create_action_entry,
    list_action_entries,
    get_piggybank_stats,
    PiggyBankStats,
)
from apps.actions.services.exceptions import (
    VoucherTemplateNotFoundError,
    ActionNotAuthorizedError,
    PiggyBankEndedError,
)


@pytest.mark.django_db
class TestCreateActionEntry:

    def test_giver_is_caller(self, partner, coffee):
        entry = create_action_entry(
            user=partner,
            voucher_template_id=coffee.id,
            occurred_at=timezone.now(),
        )

        assert entry.giver == partner
        assert entry.notes is None

    def test_unknown_template_checked_first(self, outsider):
        with pytest.raises(VoucherTemplateNotFoundError):
            create_action_entry(user=outsider, voucher_template_id=uuid4(), occurred_at=timezone.now())

    def test_access_checked_before_end_date(self, outsider, ended_template):
        with pytest.raises(ActionNotAuthorizedError):
            create_action_entry(user=outsider, voucher_template_id=ended_template.id, occurred_at=timezone.now())

    def test_ended_goal_persists_nothing(self, user, ended_template):
        with pytest.raises(PiggyBankEndedError):
            create_action_entry(user=user, voucher_template_id=ended_template.id, occurred_at=timezone.now())

        assert ActionEntry.objects.count() == 0

    def test_future_end_date_allows_entries(self, user, piggybank, coffee):
        piggybank.end_date = timezone.now() + timedelta(hours=1)
        piggybank.save()

        entry = create_action_entry(user=user, voucher_template_id=coffee.id, occurred_at=timezone.now())
        assert entry.pk is not None


@pytest.mark.django_db
class TestLedgerQueries:

    def test_groups_follow_template_order(self, user, piggybank, coffee, dinner, log_entry):
        log_entry(dinner)
        log_entry(coffee)

        groups = list_action_entries(piggybank_id=piggybank.id, user=user)

        assert [g.voucher_template for g in groups] == [coffee, dinner]

    def test_list_denied_for_outsider(self, outsider, piggybank):
        with pytest.raises(ActionNotAuthorizedError):
            list_action_entries(piggybank_id=piggybank.id, user=outsider)

    def test_stats_zero(self, user, piggybank):
        assert get_piggybank_stats(piggybank_id=piggybank.id, user=user) == PiggyBankStats(0, 0)

    def test_stats_for_ended_goal(self, user, ended_piggybank, ended_template, log_entry):
        """Existing entries still count after the goal ends."""
        log_entry(ended_template)
        log_entry(ended_template)

        stats = get_piggybank_stats(piggybank_id=ended_piggybank.id, user=user)
        assert stats == PiggyBankStats(total_actions=2, total_value=200)

    def test_stats_denied_for_outsider(self, outsider, piggybank):
        with pytest.raises(ActionNotAuthorizedError):
            get_piggybank_stats(piggybank_id=piggybank.id, user=outsider)
