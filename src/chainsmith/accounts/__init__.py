"""
Participant and key-material types.
"""

from chainsmith.accounts.base import (
    SR_STASH,
    SR_ACCOUNT,
    ED_ACCOUNT,
    EC_ACCOUNT,
    Account,
    Node,
    KeyFromSeed,
)
from chainsmith.accounts.ss58 import (
    DEFAULT_SS58_FORMAT,
    base58_encode,
    encode_address,
)

__all__ = [
    "SR_STASH",
    "SR_ACCOUNT",
    "ED_ACCOUNT",
    "EC_ACCOUNT",
    "Account",
    "Node",
    "KeyFromSeed",
    "DEFAULT_SS58_FORMAT",
    "base58_encode",
    "encode_address",
]
