"""
Authority-set mutations: session keys, aura, grandpa and collator selection.

All of these are soft no-ops on a runtime that lacks the targeted consensus
section; the result carries Issue.SECTION_ABSENT instead.
"""

from __future__ import annotations

from chainsmith.accounts import Node, encode_address
from chainsmith.core import MutationContext, MutationResult, get_path
from chainsmith.spec.locator import KeyKind, locate_authority_keys, locate_runtime_config

CLEAR_AUTHORITIES = "clear_authorities"
ADD_AUTHORITY = "add_authority"
ADD_AURA_AUTHORITY = "add_aura_authority"
ADD_GRANDPA_AUTHORITY = "add_grandpa_authority"
ADD_COLLATOR_SELECTION = "add_collator_selection"

# [stash, stash, {role: address}]
GenesisAuthorityKey = tuple[str, str, dict[str, str]]


def clear_authorities(doc: dict, context: MutationContext) -> MutationResult:
    """
    Start from an empty authority set.

    Empties every authority list present, the collator invulnerables and
    the staking stakers/invulnerables, and zeroes the validator count. The
    bond of the first existing staker is captured into `context` before
    the stakers are dropped.
    """
    runtime = locate_runtime_config(doc)
    if runtime is None:
        return MutationResult.absent(CLEAR_AUTHORITIES, "runtime")

    result = MutationResult(operation=CLEAR_AUTHORITIES, changed=True)

    for kind in KeyKind:
        keys = locate_authority_keys(runtime, kind)
        if keys is not None:
            keys.clear()

    collator_selection = runtime.get("collatorSelection")
    if isinstance(collator_selection, dict):
        collator_selection["invulnerables"] = []

    staking = runtime.get("staking")
    if isinstance(staking, dict):
        stakers = staking.get("stakers") or []
        if stakers and context.capture_bond(stakers[0][2]):
            result.details["staking_bond"] = context.staking_bond
        staking["stakers"] = []
        staking["invulnerables"] = []
        staking["validatorCount"] = 0

    result.note("Starting with a fresh authority set...")
    return result


def get_node_key(node: Node, use_stash: bool = True, ss58_format: int = 42) -> GenesisAuthorityKey:
    """
    Build the session key record of a node.

    Every role maps to the node's sr25519 account except grandpa (ed25519)
    and beefy, which is the SS58 encoding of the node's raw ECDSA public key.

    Args:
        node: Node with sr_stash, sr_account, ed_account and ec_account keys
        use_stash: Use the stash address as the controller (else sr_account)
        ss58_format: Network prefix for the beefy address
    """
    address = node.stash.address if use_stash else node.sr_account.address
    sr_address = node.sr_account.address

    ec_public_key = node.ec_account.public_key
    if ec_public_key is None:
        raise ValueError(f"Node {node.name} ec_account has no public key")

    return (
        address,
        address,
        {
            "grandpa": node.ed_account.address,
            "babe": sr_address,
            "im_online": sr_address,
            "parachain_validator": sr_address,
            "authority_discovery": sr_address,
            "para_validator": sr_address,
            "para_assignment": sr_address,
            "beefy": encode_address(ec_public_key, ss58_format),
            "aura": sr_address,
        },
    )


def add_authority(
    doc: dict,
    node: Node,
    key: GenesisAuthorityKey,
    kind: KeyKind = KeyKind.SESSION,
) -> MutationResult:
    """Append a key record to the authority list of `kind`."""
    keys = locate_authority_keys(locate_runtime_config(doc), kind)
    if keys is None:
        return MutationResult.absent(ADD_AUTHORITY, f"{kind.section} keys")

    keys.append(list(key))

    result = MutationResult(operation=ADD_AUTHORITY, changed=True)
    result.note(f"Added Genesis Authority {node.name} - {node.stash.address}")
    return result


def add_aura_authority(doc: dict, node: Node) -> MutationResult:
    """Append the node's sr25519 account to the aura authorities."""
    keys = locate_authority_keys(locate_runtime_config(doc), KeyKind.AURA)
    if keys is None:
        return MutationResult.absent(ADD_AURA_AUTHORITY, "aura keys")

    address = node.sr_account.address
    keys.append(address)

    result = MutationResult(operation=ADD_AURA_AUTHORITY, changed=True)
    result.note(f"Added Genesis Authority {node.name} - {address}")
    return result


def add_grandpa_authority(doc: dict, node: Node, context: MutationContext) -> MutationResult:
    """Append `[ed25519 address, weight]` to the grandpa authorities."""
    keys = locate_authority_keys(locate_runtime_config(doc), KeyKind.GRANDPA)
    if keys is None:
        return MutationResult.absent(ADD_GRANDPA_AUTHORITY, "grandpa keys")

    address = node.ed_account.address
    keys.append([address, context.grandpa_weight])

    result = MutationResult(operation=ADD_GRANDPA_AUTHORITY, changed=True)
    result.note(f"Added Genesis Authority (GRANDPA) {node.name} - {address}")
    return result


def add_collator_selection(doc: dict, node: Node) -> MutationResult:
    """Append the node's sr25519 account to the collator invulnerables."""
    runtime = locate_runtime_config(doc)
    invulnerables = get_path(runtime, ("collatorSelection", "invulnerables"))
    if not isinstance(invulnerables, list):
        return MutationResult.absent(ADD_COLLATOR_SELECTION, "collatorSelection")

    address = node.sr_account.address
    invulnerables.append(address)

    result = MutationResult(operation=ADD_COLLATOR_SELECTION, changed=True)
    result.note(f"Added CollatorSelection {node.name} - {address}")
    return result
