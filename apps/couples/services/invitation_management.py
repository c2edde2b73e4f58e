"""
Invitation token service.

Supports registration through an invitation link: the token locates the
request, and the new account is bound as its target exactly once.
"""

from uuid import UUID

from apps.accounts.models import User
from apps.couples.models import CoupleRequest

from .exceptions import RequestNotFoundError, InvitationTargetAlreadyBoundError


def get_request_by_invitation_token(*, token: str) -> CoupleRequest:
    """
    Raises:
        RequestNotFoundError: If no request carries the token
    """
    if not token:
        raise RequestNotFoundError("couple request not found")

    try:
        return CoupleRequest.objects.get(invitation_token=token)
    except CoupleRequest.DoesNotExist:
        raise RequestNotFoundError("couple request not found")


def bind_invitation_target(*, request_id: UUID, user: User) -> None:
    """
    Resolve an email-only request to a registered user.

    The update only applies while target_user is unset, which prevents
    binding the same invitation twice.

    Raises:
        InvitationTargetAlreadyBoundError: If the request already has a target user
    """
    updated = (
        CoupleRequest.objects
        .filter(id=request_id, target_user__isnull=True)
        .update(target_user=user, target_email=None)
    )
    if updated != 1:
        raise InvitationTargetAlreadyBoundError("invitation already bound to a user")
