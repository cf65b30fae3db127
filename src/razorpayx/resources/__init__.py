"""
Resource APIs exposed on :class:`razorpayx.RazorpayxClient`.
"""

from .contacts import Contacts, ContactType
from .fund_accounts import AccountType, FundAccounts
from .payout_links import PayoutLinks, PayoutLinkStatus
from .payouts import PayoutPurpose, Payouts
from .transactions import Transactions

__all__ = [
    "AccountType",
    "ContactType",
    "Contacts",
    "FundAccounts",
    "PayoutLinkStatus",
    "PayoutLinks",
    "PayoutPurpose",
    "Payouts",
    "Transactions",
]
