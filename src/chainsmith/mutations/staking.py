"""
Balance and staking mutations.

Bond amounts come from the run's MutationContext: the bond captured by
clear_authorities when there is one, else the context's fallback bond.
"""

from __future__ import annotations

from typing import Iterable

from chainsmith.accounts import KeyFromSeed, Node
from chainsmith.core import MutationContext, MutationResult, get_path
from chainsmith.spec.locator import locate_runtime_config

ADD_BALANCES = "add_balances"
ADD_STAKING = "add_staking"
GENERATE_NOMINATORS = "generate_nominators"

# Upper bound of the nomination count draw
MAX_FOR_RANDOM = 2**48 - 1


def balance_for(node: Node, context: MutationContext) -> int:
    """
    Genesis balance granted to `node`.

    With a captured bond, a validator already holding more than the bond
    keeps its balance and everyone else gets just above the bond. Without
    one the node's own balance is used.
    """
    if not context.has_bond:
        return node.balance
    if node.validator and node.balance > context.staking_bond:
        return node.balance
    return context.staking_bond + 1


def add_balances(doc: dict, nodes: Iterable[Node], context: MutationContext) -> MutationResult:
    """Append `[stash, amount]` for every node with a positive balance."""
    balances = get_path(locate_runtime_config(doc), ("balances", "balances"))
    if not isinstance(balances, list):
        return MutationResult.absent(ADD_BALANCES, "balances")

    result = MutationResult(operation=ADD_BALANCES)
    for node in nodes:
        if not node.balance or node.balance <= 0:
            continue

        stash = node.stash.address
        balances.append([stash, balance_for(node, context)])
        result.changed = True
        result.note(f"Added Balance {node.balance} for {node.name} - {stash}")

    return result


def add_staking(doc: dict, node: Node, context: MutationContext) -> MutationResult:
    """
    Register `node` as a validator staker.

    Appends `[stash, account, bond, "Validator"]`, bumps the validator
    count, and lists the stash as invulnerable if the node is.
    """
    staking = get_path(locate_runtime_config(doc), ("staking",))
    if not isinstance(staking, dict):
        return MutationResult.absent(ADD_STAKING, "staking")

    stash = node.stash.address
    staking.setdefault("stakers", []).append([
        stash,
        node.sr_account.address,
        context.bond,
        "Validator",
    ])
    staking["validatorCount"] = staking.get("validatorCount", 0) + 1

    if node.invulnerable:
        staking.setdefault("invulnerables", []).append(stash)

    result = MutationResult(operation=ADD_STAKING, changed=True)
    result.note(f"Added Staking {node.name} - {stash}")
    return result


def generate_nominators(
    doc: dict,
    count: int,
    max_nominations: int,
    validators: list[str],
    key_from_seed: KeyFromSeed,
    context: MutationContext,
) -> MutationResult:
    """
    Add `count` synthetic nominators backing random validators.

    Nominator `i` uses the key derived from seed `nom-{i}`, gets a balance
    just above the bond, and nominates between 1 and `max_nominations`
    distinct validators drawn with the context's RNG.

    Args:
        doc: Chain spec to mutate
        count: Number of nominators to create
        max_nominations: Upper bound on validators per nominator
        validators: Addresses that may be nominated
        key_from_seed: Deterministic key generator
        context: Run context (bond and RNG)

    Raises:
        ValueError: If the arguments cannot produce a non-empty nomination
    """
    if count < 0:
        raise ValueError(f"Nominator count must be >= 0, got {count}")
    if max_nominations < 1:
        raise ValueError(f"max_nominations must be >= 1, got {max_nominations}")

    runtime = locate_runtime_config(doc)
    stakers = get_path(runtime, ("staking", "stakers"))
    if not isinstance(stakers, list):
        return MutationResult.absent(GENERATE_NOMINATORS, "staking")
    balances = get_path(runtime, ("balances", "balances"))
    if not isinstance(balances, list):
        return MutationResult.absent(GENERATE_NOMINATORS, "balances")

    candidates = list(dict.fromkeys(validators))
    if count and not candidates:
        raise ValueError("No validators to nominate")

    bond = context.bond
    rng = context.rng
    result = MutationResult(operation=GENERATE_NOMINATORS, changed=count > 0)
    result.note(f"Generating random Nominators ({count})")

    for i in range(count):
        nominator = key_from_seed(f"nom-{i}")
        balances.append([nominator.address, bond + 1])

        # A zero draw still nominates one validator
        draw = rng.randrange(MAX_FOR_RANDOM) % max_nominations
        nominations = rng.sample(candidates, min(draw or 1, len(candidates)))

        stakers.append([
            nominator.address,
            nominator.address,
            bond,
            {"Nominator": nominations},
        ])

    result.details["count"] = count
    result.note(f"Added random Nominators ({count})")
    return result
