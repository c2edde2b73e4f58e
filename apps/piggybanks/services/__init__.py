"""
Piggybanks app services layer.

Goals belong to a couple; every lookup is scoped to the caller's couple.
"""

from .exceptions import (
    PiggyBanksServiceError,
    PiggyBankNotFoundError,
    PiggyBankNotAuthorizedError,
)

from .piggybank_management import (
    create_piggybank,
    get_piggybank,
    get_piggybank_for_member,
    close_piggybank,
)

from .piggybank_listing import (
    list_piggybanks,
)

__all__ = [
    # Exceptions
    'PiggyBanksServiceError',
    'PiggyBankNotFoundError',
    'PiggyBankNotAuthorizedError',

    # Management
    'create_piggybank',
    'get_piggybank',
    'get_piggybank_for_member',
    'close_piggybank',

    # Listing
    'list_piggybanks',
]
