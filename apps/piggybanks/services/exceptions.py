"""Domain-specific exceptions for piggybanks services."""


class PiggyBanksServiceError(Exception):
    """Base exception for piggybanks services."""
    pass


class PiggyBankNotFoundError(PiggyBanksServiceError):
    """Raised when a piggybank doesn't exist or belongs to another couple."""
    pass


class PiggyBankNotAuthorizedError(PiggyBanksServiceError):
    """Raised when the caller has no standing access to the piggybank."""
    pass
