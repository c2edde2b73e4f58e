"""Read-side helpers for couples and pending requests."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.couples.models import (
    Couple,
    CoupleRequest,
    CoupleRequestStatus,
    RequestDirection,
    UnresolvedTarget,
)


@dataclass
class RequestView:
    """A pending request seen from one of its parties."""
    request: CoupleRequest
    direction: str
    partner: User


@dataclass
class CoupleStatus:
    """The user's couple (if any) and their pending requests."""
    couple: Optional[Couple] = None
    partner: Optional[User] = None
    incoming: List[RequestView] = field(default_factory=list)
    outgoing: List[RequestView] = field(default_factory=list)


def synthetic_partner(email: str) -> User:
    """Unsaved stand-in for an invitee without an account."""
    return User(email=email, name=email)


def get_couple_for_user(user_id: UUID) -> Optional[Couple]:
    return (
        Couple.objects
        .filter(Q(partner1_id=user_id) | Q(partner2_id=user_id))
        .select_related('partner1', 'partner2')
        .first()
    )


def has_couple(user_id: UUID) -> bool:
    return Couple.objects.filter(Q(partner1_id=user_id) | Q(partner2_id=user_id)).exists()


def pending_requests_for_user(user_id: UUID) -> QuerySet:
    """Pending requests where the user is requester or target, oldest first."""
    return (
        CoupleRequest.objects
        .filter(status=CoupleRequestStatus.PENDING)
        .filter(Q(requester_id=user_id) | Q(target_user_id=user_id))
        .select_related('requester', 'target_user')
        .order_by('created_at')
    )


def pending_request_between(user_a: UUID, user_b: UUID) -> QuerySet:
    return CoupleRequest.objects.filter(
        Q(requester_id=user_a, target_user_id=user_b) | Q(requester_id=user_b, target_user_id=user_a),
        status=CoupleRequestStatus.PENDING,
    )


def get_couple_status(*, user: User) -> CoupleStatus:
    """
    Summarise a user's pairing state.

    Args:
        user: User whose status is requested

    Returns:
        CoupleStatus with the couple and partner resolved, and pending
        requests tagged incoming or outgoing relative to the user
    """
    status = CoupleStatus()

    couple = get_couple_for_user(user.id)
    if couple is not None:
        status.couple = couple
        status.partner = couple.partner2 if couple.partner1_id == user.id else couple.partner1

    for couple_request in pending_requests_for_user(user.id):
        direction = couple_request.direction_for(user.id)
        if direction == RequestDirection.OUTGOING:
            target = couple_request.target
            if isinstance(target, UnresolvedTarget):
                partner = synthetic_partner(target.email)
            else:
                partner = couple_request.target_user
            status.outgoing.append(RequestView(couple_request, direction, partner))
        else:
            status.incoming.append(RequestView(couple_request, direction, couple_request.requester))

    return status
