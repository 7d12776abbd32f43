"""
The mutation catalogue.

Every mutation is a function over a parsed chain spec that edits it in
place and returns a MutationResult. Nothing here reads or writes files.
"""

from chainsmith.mutations.authorities import (
    GenesisAuthorityKey,
    clear_authorities,
    get_node_key,
    add_authority,
    add_aura_authority,
    add_grandpa_authority,
    add_collator_selection,
)
from chainsmith.mutations.staking import (
    balance_for,
    add_balances,
    add_staking,
    generate_nominators,
)
from chainsmith.mutations.parachains import (
    HrmpChannel,
    as_payload,
    add_parachain,
    add_hrmp_channel,
)
from chainsmith.mutations.network import add_boot_nodes
from chainsmith.mutations.overrides import change_genesis_config

__all__ = [
    # authorities
    "GenesisAuthorityKey",
    "clear_authorities",
    "get_node_key",
    "add_authority",
    "add_aura_authority",
    "add_grandpa_authority",
    "add_collator_selection",
    # staking
    "balance_for",
    "add_balances",
    "add_staking",
    "generate_nominators",
    # parachains
    "HrmpChannel",
    "as_payload",
    "add_parachain",
    "add_hrmp_channel",
    # network
    "add_boot_nodes",
    # overrides
    "change_genesis_config",
]
