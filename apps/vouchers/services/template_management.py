"""Voucher template registry. Templates are immutable once created."""

import logging
from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.piggybanks.services import get_piggybank_for_member, PiggyBankNotFoundError
from apps.vouchers.models import VoucherTemplate

from .exceptions import VoucherNotAuthorizedError

logger = logging.getLogger(__name__)


def _check_access(piggybank_id, user):
    try:
        return get_piggybank_for_member(piggybank_id=piggybank_id, user=user)
    except PiggyBankNotFoundError:
        raise VoucherNotAuthorizedError("not authorized to access this voucher template")


def create_voucher_template(
    *,
    user: User,
    piggybank_id: UUID,
    title: str,
    amount_cents: int,
    description: Optional[str] = None
) -> VoucherTemplate:
    """
    Define a reward for a goal.

    Args:
        user: Creating member
        piggybank_id: Goal the template belongs to
        title: Template title
        amount_cents: Positive value in minor units
        description: Optional free text

    Returns:
        Created VoucherTemplate instance

    Raises:
        VoucherNotAuthorizedError: If the caller's couple doesn't own the goal
    """
    piggybank = _check_access(piggybank_id, user)

    template = VoucherTemplate.objects.create(
        piggybank=piggybank,
        title=title,
        description=description,
        amount_cents=amount_cents,
    )
    logger.info("Voucher template %s created on piggybank %s", template.id, piggybank.id)
    return template


def list_voucher_templates(*, piggybank_id: UUID, user: User) -> QuerySet[VoucherTemplate]:
    """
    Templates of a goal, oldest first.

    Raises:
        VoucherNotAuthorizedError: If the caller's couple doesn't own the goal
    """
    piggybank = _check_access(piggybank_id, user)
    return VoucherTemplate.objects.filter(piggybank=piggybank).order_by('created_at')
