"""Domain-specific exceptions for vouchers services."""


class VouchersServiceError(Exception):
    """Base exception for vouchers services."""
    pass


class VoucherNotAuthorizedError(VouchersServiceError):
    """Raised when the caller's couple doesn't own the template's piggybank."""
    pass
