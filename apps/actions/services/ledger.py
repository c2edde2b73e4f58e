"""
Action ledger service.

Entries are append-only. Access flows through the template's piggybank:
the caller's couple must own it.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from itertools import groupby
from typing import List, Optional
from uuid import UUID

from apps.accounts.models import User
from apps.actions.models import ActionEntry
from apps.piggybanks.models import PiggyBank
from apps.piggybanks.services import get_piggybank_for_member, PiggyBankNotFoundError
from apps.vouchers.models import VoucherTemplate

from .exceptions import (
    VoucherTemplateNotFoundError,
    ActionNotAuthorizedError,
    PiggyBankEndedError,
)

logger = logging.getLogger(__name__)


@dataclass
class ActionEntryGroup:
    """Entries of one voucher template, newest first."""
    voucher_template: VoucherTemplate
    entries: List[ActionEntry] = field(default_factory=list)


def get_member_piggybank(*, piggybank_id: UUID, user: User) -> PiggyBank:
    """
    Raises:
        ActionNotAuthorizedError: If the caller's couple doesn't own the goal
    """
    try:
        return get_piggybank_for_member(piggybank_id=piggybank_id, user=user)
    except PiggyBankNotFoundError:
        raise ActionNotAuthorizedError("not authorized to access action entries")


def create_action_entry(
    *,
    user: User,
    voucher_template_id: UUID,
    occurred_at: datetime,
    notes: Optional[str] = None
) -> ActionEntry:
    """
    Log that a voucher was given.

    Args:
        user: Member giving the voucher
        voucher_template_id: Template being redeemed
        occurred_at: When it happened, caller supplied
        notes: Optional free text

    Returns:
        Created ActionEntry instance

    Raises:
        VoucherTemplateNotFoundError: If the template doesn't exist
        ActionNotAuthorizedError: If the caller's couple doesn't own the goal
        PiggyBankEndedError: If the goal's end date is in the past
    """
    template = VoucherTemplate.objects.filter(id=voucher_template_id).first()
    if template is None:
        raise VoucherTemplateNotFoundError("voucher template not found")

    try:
        piggybank = get_piggybank_for_member(piggybank_id=template.piggybank_id, user=user)
    except PiggyBankNotFoundError:
        raise ActionNotAuthorizedError("not authorized to create action entries")

    if piggybank.has_ended():
        raise PiggyBankEndedError("cannot create action entries for ended piggybank")

    entry = ActionEntry.objects.create(
        voucher_template=template,
        giver=user,
        occurred_at=occurred_at,
        notes=notes,
    )
    logger.info("Action entry %s logged on template %s by %s", entry.id, template.id, user.id)
    return entry


def list_action_entries(*, piggybank_id: UUID, user: User) -> List[ActionEntryGroup]:
    """
    Entries of a goal grouped per voucher template.

    Groups follow template creation order; templates without entries are
    left out. Entries within a group are newest first.

    Raises:
        ActionNotAuthorizedError: If the caller's couple doesn't own the goal
    """
    piggybank = get_member_piggybank(piggybank_id=piggybank_id, user=user)

    entries = (
        ActionEntry.objects
        .filter(voucher_template__piggybank=piggybank)
        .select_related('voucher_template')
        .order_by('voucher_template__created_at', 'voucher_template_id', '-occurred_at', '-created_at')
    )

    groups = []
    for _, items in groupby(entries, key=lambda entry: entry.voucher_template_id):
        items = list(items)
        groups.append(ActionEntryGroup(voucher_template=items[0].voucher_template, entries=items))
    return groups
