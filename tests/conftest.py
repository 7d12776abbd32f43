import json

import pytest

from chainsmith.accounts import Account, Node
from chainsmith.core import MutationContext

EC_PUBLIC_KEY = bytes([0x02]) + bytes(range(32))


def make_runtime():
    return {
        "system": {"code": "0x0061736d"},
        "balances": {"balances": [["5Existing", 1000]]},
        "session": {"keys": [["old", "old", {"grandpa": "oldG"}]]},
        "aura": {"authorities": ["oldAura"]},
        "grandpa": {"authorities": [["oldGrandpa", 1]]},
        "collatorSelection": {"invulnerables": ["oldCollator"], "candidacyBond": 16000000000},
        "staking": {
            "validatorCount": 1,
            "minimumValidatorCount": 1,
            "stakers": [["addrA", "addrB", 500, "Validator"]],
            "invulnerables": ["addrA"],
        },
        "paras": {"paras": []},
        "hrmp": {"preopenHrmpChannels": []},
    }


def make_spec(nested: bool = False) -> dict:
    runtime = make_runtime()
    if nested:
        genesis = {"runtime": {"runtime_genesis_config": runtime}}
    else:
        genesis = {"runtime": runtime}
    return {
        "name": "Local Testnet",
        "id": "local_testnet",
        "bootNodes": ["/ip4/127.0.0.1/tcp/30333/p2p/old"],
        "genesis": genesis,
    }


def make_node(name: str, balance: int | None = 2_000_000_000_000, validator: bool = True,
              invulnerable: bool = False) -> Node:
    return Node(
        name=name,
        balance=balance,
        validator=validator,
        invulnerable=invulnerable,
        accounts={
            "sr_stash": Account(address=f"{name}-stash"),
            "sr_account": Account(address=f"{name}-sr"),
            "ed_account": Account(address=f"{name}-ed"),
            "ec_account": Account(address=f"{name}-ec", public_key=EC_PUBLIC_KEY),
        },
    )


def fake_key_from_seed(seed: str) -> Account:
    return Account(address=f"addr-{seed}")


@pytest.fixture
def spec():
    return make_spec()


@pytest.fixture
def nested_spec():
    return make_spec(nested=True)


@pytest.fixture
def context():
    ctx = MutationContext()
    ctx.set_seed(1234)
    return ctx


@pytest.fixture
def alice():
    return make_node("alice")


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "spec.json"
    path.write_text(json.dumps(make_spec(), indent=2))
    return path
