"""
Registration through a couple invitation link.

The invitee registers with the token from the invitation email; the new
account is then bound as the target of the pending couple request.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.couples.models import UnresolvedTarget
from apps.couples.services import (
    get_request_by_invitation_token,
    bind_invitation_target,
    RequestNotFoundError,
    InvitationTargetAlreadyBoundError,
)

from .exceptions import (
    InvalidInvitationTokenError,
    InvitationEmailMismatchError,
    InvitationAlreadyClaimedError,
)
from .user_registration import register_user, validate_email_address

User = get_user_model()

logger = logging.getLogger(__name__)


def register_with_invitation(
    *,
    email: str,
    password: str,
    name: str,
    invitation_token: str
) -> User:
    """
    Register a user and bind them to the invitation they received.

    Args:
        email: Must match the address the invitation was sent to
        password: User's password
        name: Display name
        invitation_token: Token from the invitation link

    Returns:
        Created User instance

    Raises:
        InvalidInvitationTokenError: If the token matches no request
        InvitationEmailMismatchError: If email differs from the invited address
        InvitationAlreadyClaimedError: If the request already has a target user
        RegistrationValidationError subclasses: see register_user
    """
    try:
        couple_request = get_request_by_invitation_token(token=invitation_token)
    except RequestNotFoundError:
        raise InvalidInvitationTokenError("invalid invitation token")

    email = validate_email_address(email)
    target = couple_request.target
    if not isinstance(target, UnresolvedTarget) or target.email != email:
        raise InvitationEmailMismatchError("email does not match invitation")

    # Account creation and binding commit together
    with transaction.atomic():
        user = register_user(email=email, password=password, name=name)
        try:
            bind_invitation_target(request_id=couple_request.id, user=user)
        except InvitationTargetAlreadyBoundError:
            raise InvitationAlreadyClaimedError("invitation has already been used")

    logger.info("User %s registered through invitation %s", user.id, couple_request.id)
    return user
