"""
Domain-specific exceptions for the couples app.

These exceptions represent pairing rule violations and are caught in
views and converted to HTTP responses.
"""


class CouplesServiceError(Exception):
    """Base exception for all couples service errors."""
    pass


class PartnerRequiredError(CouplesServiceError):
    """Raised when no partner email is supplied."""
    pass


class InvalidPartnerEmailError(CouplesServiceError):
    """Raised when the partner email is malformed."""
    pass


class CannotInviteSelfError(CouplesServiceError):
    """Raised when the partner email belongs to the requester."""
    pass


class AlreadyCoupledError(CouplesServiceError):
    """Raised when either party already belongs to a couple."""
    pass


class PendingRequestExistsError(CouplesServiceError):
    """Raised when either party already has a pending request."""
    pass


class RequestNotFoundError(CouplesServiceError):
    """Raised when a couple request does not exist."""
    pass


class RequestNotAuthorizedError(CouplesServiceError):
    """Raised when the caller may not act on the request."""
    pass


class RequestNotPendingError(CouplesServiceError):
    """Raised when the request has already left the pending state."""
    pass


class InvitationTargetAlreadyBoundError(CouplesServiceError):
    """Raised when an invitation already has a target user."""
    pass
