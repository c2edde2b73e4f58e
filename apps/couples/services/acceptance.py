"""
Couple acceptance service.

Accepting flips the request to accepted and creates the couple in one
transaction. The status update is conditioned on the row still being
pending, so two simultaneous accepts can never produce two couples.
"""

import logging
from datetime import datetime
from typing import Tuple
from uuid import UUID

from django.db import transaction, IntegrityError
from django.utils import timezone

from apps.accounts.models import User
from apps.couples.models import Couple, CoupleRequest, CoupleRequestStatus, ResolvedTarget

from .couple_queries import has_couple
from .exceptions import (
    AlreadyCoupledError,
    RequestNotFoundError,
    RequestNotAuthorizedError,
    RequestNotPendingError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def accept_request_with_couple(*, couple_request: CoupleRequest, accepted_at: datetime) -> Couple:
    """
    Mark the request accepted and insert the couple, atomically.

    Raises:
        RequestNotPendingError: If the conditional update matched no row
        AlreadyCoupledError: If a couple constraint rejected the insert
    """
    updated = (
        CoupleRequest.objects
        .filter(id=couple_request.id, status=CoupleRequestStatus.PENDING)
        .update(status=CoupleRequestStatus.ACCEPTED, responded_at=accepted_at)
    )
    if updated != 1:
        raise RequestNotPendingError("request is no longer pending")

    try:
        with transaction.atomic():
            couple = Couple.objects.create(
                partner1_id=couple_request.requester_id,
                partner2_id=couple_request.target_user_id,
            )
    except IntegrityError:
        raise AlreadyCoupledError("user already belongs to a couple")

    return couple


def accept_couple(*, request_id: UUID, user: User) -> Tuple[Couple, User]:
    """
    Accept a pending couple request as its invitee.

    Args:
        request_id: UUID of the couple request
        user: Caller, must be the resolved target user

    Returns:
        (created couple, partner). The partner is the requester.

    Raises:
        RequestNotFoundError: If the request doesn't exist
        RequestNotPendingError: If the request is not (or no longer) pending
        RequestNotAuthorizedError: If the target is unresolved or not the caller
        AlreadyCoupledError: If either party already belongs to a couple
    """
    try:
        couple_request = CoupleRequest.objects.get(id=request_id)
    except CoupleRequest.DoesNotExist:
        raise RequestNotFoundError("couple request not found")

    if not couple_request.is_pending:
        raise RequestNotPendingError("request is no longer pending")

    # Email-only invitations must be claimed through registration first
    target = couple_request.target
    if not isinstance(target, ResolvedTarget) or target.user_id != user.id:
        raise RequestNotAuthorizedError("not authorized to act on this request")

    if has_couple(couple_request.requester_id) or has_couple(target.user_id):
        raise AlreadyCoupledError("user already belongs to a couple")

    couple = accept_request_with_couple(couple_request=couple_request, accepted_at=timezone.now())
    logger.info("Couple request %s accepted, couple %s created", couple_request.id, couple.id)

    return couple, User.objects.get_by_id(couple.partner_of(user.id))
