import pytest

from chainsmith.core import DEFAULT_STAKING_BOND, Issue, MutationContext
from chainsmith.mutations import add_balances, add_staking, clear_authorities, generate_nominators
from chainsmith.spec.locator import locate_runtime_config

from conftest import fake_key_from_seed, make_node


def balances_of(spec):
    return locate_runtime_config(spec)["balances"]["balances"]


class TestBalances:
    def test_without_bond_uses_raw_balance(self, spec, context):
        node = make_node("alice", balance=777, validator=False)
        add_balances(spec, [node], context)
        assert balances_of(spec)[-1] == ["alice-stash", 777]

    def test_non_validator_gets_bond_plus_one(self, spec, context):
        clear_authorities(spec, context)
        add_balances(spec, [make_node("bob", balance=10**20, validator=False)], context)
        assert balances_of(spec)[-1] == ["bob-stash", 501]

    def test_rich_validator_keeps_balance(self, spec, context):
        clear_authorities(spec, context)
        add_balances(spec, [make_node("alice", balance=10**20)], context)
        assert balances_of(spec)[-1] == ["alice-stash", 10**20]

    def test_poor_validator_gets_bond_plus_one(self, spec, context):
        clear_authorities(spec, context)
        add_balances(spec, [make_node("alice", balance=100)], context)
        assert balances_of(spec)[-1] == ["alice-stash", 501]

    def test_skips_nodes_without_balance(self, spec, context):
        result = add_balances(spec, [make_node("a", balance=None), make_node("b", balance=0)], context)
        assert balances_of(spec) == [["5Existing", 1000]]
        assert not result.changed

    def test_missing_balances(self, spec, context):
        del locate_runtime_config(spec)["balances"]
        result = add_balances(spec, [make_node("a")], context)
        assert result.issues == Issue.SECTION_ABSENT


class TestStaking:
    def test_fallback_bond(self, spec, context):
        node = make_node("alice", invulnerable=True)
        add_staking(spec, node, context)
        staking = locate_runtime_config(spec)["staking"]
        assert staking["stakers"][-1] == ["alice-stash", "alice-sr", DEFAULT_STAKING_BOND, "Validator"]
        assert staking["validatorCount"] == 2
        assert staking["invulnerables"][-1] == "alice-stash"

    def test_captured_bond(self, spec, context):
        clear_authorities(spec, context)
        add_staking(spec, make_node("alice"), context)
        staking = locate_runtime_config(spec)["staking"]
        assert staking["stakers"] == [["alice-stash", "alice-sr", 500, "Validator"]]
        assert staking["validatorCount"] == 1
        assert staking["invulnerables"] == []

    def test_missing_staking(self, spec, context):
        del locate_runtime_config(spec)["staking"]
        result = add_staking(spec, make_node("alice"), context)
        assert result.issues == Issue.SECTION_ABSENT
        assert not result.changed


class TestNominators:
    VALIDATORS = ["v1", "v2", "v3", "v4", "v5"]

    def test_nominations_are_non_empty_distinct_subsets(self, spec, context):
        clear_authorities(spec, context)
        generate_nominators(spec, 50, 3, self.VALIDATORS, fake_key_from_seed, context)

        stakers = locate_runtime_config(spec)["staking"]["stakers"]
        assert len(stakers) == 50
        for i, (stash, controller, bond, role) in enumerate(stakers):
            assert stash == controller == f"addr-nom-{i}"
            assert bond == 500
            nominations = role["Nominator"]
            assert 1 <= len(nominations) <= 3
            assert len(set(nominations)) == len(nominations)
            assert set(nominations) <= set(self.VALIDATORS)

    def test_balances_are_bond_plus_one(self, spec, context):
        clear_authorities(spec, context)
        generate_nominators(spec, 2, 2, self.VALIDATORS, fake_key_from_seed, context)
        assert balances_of(spec)[-2:] == [["addr-nom-0", 501], ["addr-nom-1", 501]]

    def test_single_nomination(self, spec, context):
        generate_nominators(spec, 5, 1, self.VALIDATORS, fake_key_from_seed, context)
        for staker in locate_runtime_config(spec)["staking"]["stakers"][1:]:
            assert len(staker[3]["Nominator"]) == 1
            assert staker[2] == DEFAULT_STAKING_BOND

    def test_is_deterministic_for_a_seed(self, spec):
        from conftest import make_spec

        other = make_spec()
        first, second = MutationContext(), MutationContext()
        first.set_seed(7)
        second.set_seed(7)
        generate_nominators(spec, 10, 4, self.VALIDATORS, fake_key_from_seed, first)
        generate_nominators(other, 10, 4, self.VALIDATORS, fake_key_from_seed, second)
        assert spec == other

    def test_duplicate_validators_are_collapsed(self, spec, context):
        generate_nominators(spec, 20, 5, ["v1", "v1", "v2"], fake_key_from_seed, context)
        for staker in locate_runtime_config(spec)["staking"]["stakers"][1:]:
            nominations = staker[3]["Nominator"]
            assert len(set(nominations)) == len(nominations)

    def test_invalid_arguments(self, spec, context):
        with pytest.raises(ValueError):
            generate_nominators(spec, 1, 0, self.VALIDATORS, fake_key_from_seed, context)
        with pytest.raises(ValueError):
            generate_nominators(spec, 1, 2, [], fake_key_from_seed, context)

    def test_missing_staking(self, spec, context):
        del locate_runtime_config(spec)["staking"]
        result = generate_nominators(spec, 3, 2, self.VALIDATORS, fake_key_from_seed, context)
        assert result.issues == Issue.SECTION_ABSENT
        assert balances_of(spec) == [["5Existing", 1000]]
