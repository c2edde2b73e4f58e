"""
Actions app services layer.

The ledger records voucher redemptions; statistics summarise them per goal.
"""

from .exceptions import (
    ActionsServiceError,
    VoucherTemplateNotFoundError,
    ActionNotAuthorizedError,
    PiggyBankEndedError,
)

from .ledger import (
    ActionEntryGroup,
    create_action_entry,
    list_action_entries,
)

from .statistics import (
    PiggyBankStats,
    get_piggybank_stats,
)

__all__ = [
    # Exceptions
    'ActionsServiceError',
    'VoucherTemplateNotFoundError',
    'ActionNotAuthorizedError',
    'PiggyBankEndedError',

    # Ledger
    'ActionEntryGroup',
    'create_action_entry',
    'list_action_entries',

    # Statistics
    'PiggyBankStats',
    'get_piggybank_stats',
]
