"""Domain-specific exceptions for actions services."""


class ActionsServiceError(Exception):
    """Base exception for actions services."""
    pass


class VoucherTemplateNotFoundError(ActionsServiceError):
    """Raised when the referenced voucher template doesn't exist."""
    pass


class ActionNotAuthorizedError(ActionsServiceError):
    """Raised when the caller's couple doesn't own the piggybank."""
    pass


class PiggyBankEndedError(ActionsServiceError):
    """Raised when logging an action on a piggybank whose end date has passed."""
    pass
