"""
Couple request service.

Creates invitations and re-sends them. Every precondition maps to its own
exception so views can answer with a precise status code.
"""

import logging
from typing import Tuple
from uuid import UUID

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import transaction, IntegrityError

from apps.accounts.models import User, normalize_email_address
from apps.couples.models import CoupleRequest, ResolvedTarget

from .couple_queries import (
    has_couple,
    pending_request_between,
    pending_requests_for_user,
    synthetic_partner,
)
from .exceptions import (
    PartnerRequiredError,
    InvalidPartnerEmailError,
    CannotInviteSelfError,
    AlreadyCoupledError,
    PendingRequestExistsError,
    RequestNotFoundError,
    RequestNotAuthorizedError,
    RequestNotPendingError,
)
from .notifications import dispatch_invitation

logger = logging.getLogger(__name__)


@transaction.atomic
def request_couple(*, requester: User, partner_email: str) -> Tuple[CoupleRequest, User]:
    """
    Invite a partner, by account or by email, to form a couple.

    Checks run in order and the first failure wins:
        1. partner email present and well formed
        2. partner is not the requester
        3. requester is not already coupled
        4. an existing partner is not coupled, shares no pending request
           with the requester and has no pending request of their own
        5. requester has no pending request

    Args:
        requester: User sending the invitation
        partner_email: Invitee's address

    Returns:
        (created request, partner). The partner is an unsaved User when
        the invitee has no account yet.

    Raises:
        PartnerRequiredError, InvalidPartnerEmailError, CannotInviteSelfError,
        AlreadyCoupledError, PendingRequestExistsError
    """
    email = normalize_email_address(partner_email)
    if not email:
        raise PartnerRequiredError("partner email is required")

    try:
        validate_email(email)
    except ValidationError:
        raise InvalidPartnerEmailError("invalid partner email")

    try:
        target = User.objects.get_by_email(email)
    except User.DoesNotExist:
        target = None

    if target is not None and target.id == requester.id:
        raise CannotInviteSelfError("cannot invite yourself")

    if has_couple(requester.id):
        raise AlreadyCoupledError("user already belongs to a couple")

    if target is not None:
        if has_couple(target.id):
            raise AlreadyCoupledError("user already belongs to a couple")

        if pending_request_between(requester.id, target.id).exists():
            raise PendingRequestExistsError("pending request already exists")

        if pending_requests_for_user(target.id).exists():
            raise PendingRequestExistsError("pending request already exists")

    if pending_requests_for_user(requester.id).exists():
        raise PendingRequestExistsError("pending request already exists")

    try:
        with transaction.atomic():
            couple_request = CoupleRequest.objects.create(
                requester=requester,
                target_user=target,
                target_email=None if target is not None else email,
            )
    except IntegrityError:
        # A concurrent submission won the partial unique index
        raise PendingRequestExistsError("pending request already exists")

    logger.info(
        "Couple request %s created by %s (target %s)",
        couple_request.id, requester.id, 'resolved' if target is not None else 'by email',
    )

    dispatch_invitation(
        to_email=email,
        inviter_name=requester.name,
        invitation_token=couple_request.invitation_token,
    )

    return couple_request, target if target is not None else synthetic_partner(email)


def resend_couple(*, request_id: UUID, user: User) -> CoupleRequest:
    """
    Re-send the invitation email of a pending outgoing request.

    The same invitation token is reused. The address is the target user's
    email when resolved, otherwise the stored raw address.

    Raises:
        RequestNotFoundError: If the request doesn't exist
        RequestNotPendingError: If the request is accepted or rejected
        RequestNotAuthorizedError: If the caller is not the requester
    """
    try:
        couple_request = CoupleRequest.objects.select_related('requester').get(id=request_id)
    except CoupleRequest.DoesNotExist:
        raise RequestNotFoundError("couple request not found")

    if not couple_request.is_pending:
        raise RequestNotPendingError("request is no longer pending")

    if couple_request.requester_id != user.id:
        raise RequestNotAuthorizedError("not authorized to act on this request")

    target = couple_request.target
    if isinstance(target, ResolvedTarget):
        email = User.objects.get_by_id(target.user_id).email
    else:
        email = target.email

    dispatch_invitation(
        to_email=email,
        inviter_name=couple_request.requester.name,
        invitation_token=couple_request.invitation_token,
    )
    logger.info("Invitation for couple request %s re-sent", couple_request.id)

    return couple_request
