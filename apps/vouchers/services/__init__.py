"""Vouchers app services layer."""

from .exceptions import (
    VouchersServiceError,
    VoucherNotAuthorizedError,
)

from .template_management import (
    create_voucher_template,
    list_voucher_templates,
)

__all__ = [
    # Exceptions
    'VouchersServiceError',
    'VoucherNotAuthorizedError',

    # Templates
    'create_voucher_template',
    'list_voucher_templates',
]
