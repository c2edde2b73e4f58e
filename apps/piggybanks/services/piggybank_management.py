"""
Piggybank management service.

Access control is a single joined lookup: the goal filtered by id and by
couple membership of the caller. A goal of another couple is treated
exactly like a missing one.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.utils import timezone

from apps.accounts.models import User
from apps.couples.services import get_couple_for_user
from apps.piggybanks.models import PiggyBank

from .exceptions import PiggyBankNotFoundError, PiggyBankNotAuthorizedError

logger = logging.getLogger(__name__)


def get_piggybank_for_member(*, piggybank_id: UUID, user: User) -> PiggyBank:
    """
    Fetch a goal the user's couple owns.

    Raises:
        PiggyBankNotFoundError: If the goal doesn't exist or isn't owned
    """
    piggybank = (
        PiggyBank.objects
        .filter(PiggyBank.member_filter(user.id), id=piggybank_id)
        .first()
    )
    if piggybank is None:
        raise PiggyBankNotFoundError("piggybank not found")
    return piggybank


def create_piggybank(
    *,
    user: User,
    title: str,
    start_date: datetime,
    description: Optional[str] = None,
    end_date: Optional[datetime] = None
) -> PiggyBank:
    """
    Create a goal for the user's couple.

    Args:
        user: Creating member
        title: Goal title
        start_date: When saving starts
        description: Optional free text
        end_date: Optional closing date

    Returns:
        Created PiggyBank instance

    Raises:
        PiggyBankNotAuthorizedError: If the user doesn't belong to a couple
    """
    couple = get_couple_for_user(user.id)
    if couple is None:
        raise PiggyBankNotAuthorizedError("not authorized to access this piggybank")

    piggybank = PiggyBank.objects.create(
        couple=couple,
        title=title,
        description=description,
        start_date=start_date,
        end_date=end_date,
    )
    logger.info("Piggybank %s created for couple %s", piggybank.id, couple.id)
    return piggybank


def get_piggybank(*, piggybank_id: UUID, user: User) -> PiggyBank:
    """
    Raises:
        PiggyBankNotFoundError: If the goal doesn't exist or isn't owned
    """
    return get_piggybank_for_member(piggybank_id=piggybank_id, user=user)


def close_piggybank(*, piggybank_id: UUID, user: User) -> PiggyBank:
    """
    Close a goal by setting its end date to now.

    Raises:
        PiggyBankNotAuthorizedError: If the goal doesn't exist or isn't owned
    """
    try:
        piggybank = get_piggybank_for_member(piggybank_id=piggybank_id, user=user)
    except PiggyBankNotFoundError:
        raise PiggyBankNotAuthorizedError("not authorized to access this piggybank")

    piggybank.end_date = timezone.now()
    piggybank.save(update_fields=['end_date', 'updated_at'])
    logger.info("Piggybank %s closed by %s", piggybank.id, user.id)
    return piggybank
