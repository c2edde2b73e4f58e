"""Open goals of a couple with their progress totals."""

from django.db.models import Count, IntegerField, OuterRef, QuerySet, Subquery, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.actions.models import ActionEntry
from apps.piggybanks.models import PiggyBank
from apps.vouchers.models import VoucherTemplate


def _per_goal(queryset, goal_field, **aggregates):
    """Correlated subquery aggregating rows of one goal."""
    return (
        queryset
        .filter(**{goal_field: OuterRef('pk')})
        .order_by()
        .values(goal_field)
        .annotate(**aggregates)
    )


def list_piggybanks(*, user: User) -> QuerySet[PiggyBank]:
    """
    List the open goals of the user's couple, newest first.

    Each goal is annotated with voucher_templates_count, total_actions and
    total_value (sum of amount_cents over its action entries). The totals
    are computed by correlated subqueries so the joins never multiply rows.

    Returns:
        QuerySet of PiggyBank, empty when the user has no couple
    """
    templates = _per_goal(VoucherTemplate.objects, 'piggybank', n=Count('id'))
    actions = _per_goal(
        ActionEntry.objects,
        'voucher_template__piggybank',
        n=Count('id'),
        total=Sum('voucher_template__amount_cents'),
    )

    return (
        PiggyBank.objects
        .filter(PiggyBank.member_filter(user.id))
        .filter(PiggyBank.open_filter())
        .annotate(
            voucher_templates_count=Coalesce(
                Subquery(templates.values('n'), output_field=IntegerField()), Value(0)
            ),
            total_actions=Coalesce(
                Subquery(actions.values('n'), output_field=IntegerField()), Value(0)
            ),
            total_value=Coalesce(
                Subquery(actions.values('total'), output_field=IntegerField()), Value(0)
            ),
        )
        .order_by('-created_at')
    )
