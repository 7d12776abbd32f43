"""
Network participants and their key material.

Keys are derived elsewhere; these types only carry the addresses and
public keys the genesis mutations need.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

# Account roles a node carries
SR_STASH = "sr_stash"
SR_ACCOUNT = "sr_account"
ED_ACCOUNT = "ed_account"
EC_ACCOUNT = "ec_account"


@dataclass(frozen=True)
class Account:
    """A single key pair, as seen by the chain spec."""
    address: str
    public_key: bytes | None = None


@dataclass
class Node:
    """A network participant to be placed in the genesis."""
    name: str
    accounts: dict[str, Account] = field(default_factory=dict)
    balance: int | None = None
    validator: bool = False
    invulnerable: bool = False

    def account(self, role: str) -> Account:
        """Return the key pair for `role`."""
        try:
            return self.accounts[role]
        except KeyError:
            raise KeyError(f"Node {self.name} has no {role} account") from None

    @property
    def stash(self) -> Account:
        return self.account(SR_STASH)

    @property
    def sr_account(self) -> Account:
        return self.account(SR_ACCOUNT)

    @property
    def ed_account(self) -> Account:
        return self.account(ED_ACCOUNT)

    @property
    def ec_account(self) -> Account:
        return self.account(EC_ACCOUNT)


# Deterministic key generator: seed string -> key pair
KeyFromSeed = Callable[[str], Account]
