"""Progress totals of a piggybank."""

from dataclasses import dataclass
from uuid import UUID

from django.db.models import Count, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.actions.models import ActionEntry

from .ledger import get_member_piggybank


@dataclass
class PiggyBankStats:
    total_actions: int = 0
    total_value: int = 0


def get_piggybank_stats(*, piggybank_id: UUID, user: User) -> PiggyBankStats:
    """
    Count entries and sum their template amounts in one aggregate query.

    Returns:
        PiggyBankStats, zeros when the goal has no entries

    Raises:
        ActionNotAuthorizedError: If the caller's couple doesn't own the goal
    """
    piggybank = get_member_piggybank(piggybank_id=piggybank_id, user=user)

    totals = (
        ActionEntry.objects
        .filter(voucher_template__piggybank=piggybank)
        .aggregate(
            total_actions=Count('id'),
            total_value=Coalesce(Sum('voucher_template__amount_cents'), Value(0)),
        )
    )
    return PiggyBankStats(**totals)
