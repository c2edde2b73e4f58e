"""
Couples app services layer.

Services hold the pairing workflow: request, accept, resend, status and
the invitation-token bridge used by registration.
"""

from .exceptions import (
    CouplesServiceError,
    PartnerRequiredError,
    InvalidPartnerEmailError,
    CannotInviteSelfError,
    AlreadyCoupledError,
    PendingRequestExistsError,
    RequestNotFoundError,
    RequestNotAuthorizedError,
    RequestNotPendingError,
    InvitationTargetAlreadyBoundError,
)

from .couple_queries import (
    CoupleStatus,
    RequestView,
    get_couple_for_user,
    get_couple_status,
    has_couple,
)

from .request_management import (
    request_couple,
    resend_couple,
)

from .acceptance import (
    accept_couple,
    accept_request_with_couple,
)

from .invitation_management import (
    get_request_by_invitation_token,
    bind_invitation_target,
)

from .notifications import (
    build_invitation_url,
    dispatch_invitation,
)


__all__ = [
    # Exceptions
    'CouplesServiceError',
    'PartnerRequiredError',
    'InvalidPartnerEmailError',
    'CannotInviteSelfError',
    'AlreadyCoupledError',
    'PendingRequestExistsError',
    'RequestNotFoundError',
    'RequestNotAuthorizedError',
    'RequestNotPendingError',
    'InvitationTargetAlreadyBoundError',

    # Queries
    'CoupleStatus',
    'RequestView',
    'get_couple_for_user',
    'get_couple_status',
    'has_couple',

    # Requests
    'request_couple',
    'resend_couple',

    # Acceptance
    'accept_couple',
    'accept_request_with_couple',

    # Invitations
    'get_request_by_invitation_token',
    'bind_invitation_target',

    # Notifications
    'build_invitation_url',
    'dispatch_invitation',
]
